from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from millionaire.db.models.ledger_entries import LedgerEntry
from millionaire.economy.ledger.service import LedgerService, game_prize_idempotency_key
from millionaire.game.sessions.errors import PlayerNotFoundError

UTC = timezone.utc
NOW_UTC = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _install_fakes(
    monkeypatch: pytest.MonkeyPatch,
    *,
    user: object | None,
    entries: dict[str, LedgerEntry],
) -> None:
    async def fake_get_user_for_update(session, user_id):  # noqa: ANN001
        del session, user_id
        return user

    async def fake_get_by_idempotency_key(session, idempotency_key):  # noqa: ANN001
        del session
        return entries.get(idempotency_key)

    async def fake_create(session, *, entry):  # noqa: ANN001
        del session
        entries[entry.idempotency_key] = entry
        return entry

    monkeypatch.setattr(
        "millionaire.economy.ledger.service.UsersRepo.get_by_id_for_update",
        fake_get_user_for_update,
    )
    monkeypatch.setattr(
        "millionaire.economy.ledger.service.LedgerRepo.get_by_idempotency_key",
        fake_get_by_idempotency_key,
    )
    monkeypatch.setattr("millionaire.economy.ledger.service.LedgerRepo.create", fake_create)


@pytest.mark.asyncio
async def test_credit_game_prize_adds_to_balance_and_records_entry(monkeypatch: pytest.MonkeyPatch) -> None:
    user = SimpleNamespace(id=5, balance=200)
    entries: dict[str, LedgerEntry] = {}
    _install_fakes(monkeypatch, user=user, entries=entries)
    game_session_id = uuid4()

    result = await LedgerService.credit_game_prize(
        object(),
        user_id=5,
        game_session_id=game_session_id,
        amount=32_000,
        now_utc=NOW_UTC,
    )

    assert result.amount == 32_000
    assert result.balance == 32_200
    assert result.idempotent_replay is False
    assert user.balance == 32_200
    entry = entries[game_prize_idempotency_key(game_session_id)]
    assert entry.entry_type == "GAME_PRIZE"
    assert entry.direction == "CREDIT"
    assert entry.balance_after == 32_200


@pytest.mark.asyncio
async def test_credit_game_prize_is_idempotent_per_session(monkeypatch: pytest.MonkeyPatch) -> None:
    user = SimpleNamespace(id=5, balance=0)
    entries: dict[str, LedgerEntry] = {}
    _install_fakes(monkeypatch, user=user, entries=entries)
    game_session_id = uuid4()

    await LedgerService.credit_game_prize(
        object(), user_id=5, game_session_id=game_session_id, amount=1_000, now_utc=NOW_UTC
    )
    replay = await LedgerService.credit_game_prize(
        object(), user_id=5, game_session_id=game_session_id, amount=1_000, now_utc=NOW_UTC
    )

    assert replay.idempotent_replay is True
    assert user.balance == 1_000
    assert len(entries) == 1


@pytest.mark.asyncio
async def test_zero_prize_leaves_no_entry(monkeypatch: pytest.MonkeyPatch) -> None:
    user = SimpleNamespace(id=5, balance=300)
    entries: dict[str, LedgerEntry] = {}
    _install_fakes(monkeypatch, user=user, entries=entries)

    result = await LedgerService.credit_game_prize(
        object(), user_id=5, game_session_id=uuid4(), amount=0, now_utc=NOW_UTC
    )

    assert result.amount == 0
    assert result.balance == 300
    assert entries == {}


@pytest.mark.asyncio
async def test_credit_game_prize_rejects_bad_input(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fakes(monkeypatch, user=None, entries={})

    with pytest.raises(PlayerNotFoundError):
        await LedgerService.credit_game_prize(
            object(), user_id=9, game_session_id=uuid4(), amount=100, now_utc=NOW_UTC
        )
    with pytest.raises(ValueError):
        await LedgerService.credit_game_prize(
            object(), user_id=9, game_session_id=uuid4(), amount=-1, now_utc=NOW_UTC
        )
