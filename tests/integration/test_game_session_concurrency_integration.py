from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from millionaire.db.models.game_sessions import GameSession
from millionaire.db.models.ledger_entries import LedgerEntry
from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.db.repo.users_repo import UsersRepo
from millionaire.db.session import SessionLocal
from millionaire.game.sessions.service import GameSessionService
from millionaire.game.sessions.types import CreateSessionResult, TakeMoneyResult
from tests.integration.game_flow_fixtures import _create_player, _seed_bank

UTC = timezone.utc


@pytest.mark.asyncio
async def test_parallel_create_yields_single_live_session() -> None:
    now_utc = datetime.now(UTC)
    await _seed_bank(now_utc=now_utc)
    user_id = await _create_player("double clicker", now_utc=now_utc)
    barrier = asyncio.Event()

    async def _attempt() -> CreateSessionResult:
        await barrier.wait()
        async with SessionLocal.begin() as session:
            return await GameSessionService.create_session_for_player(session, user_id=user_id, now_utc=now_utc)

    tasks = [asyncio.create_task(_attempt()) for _ in range(4)]
    barrier.set()
    results = await asyncio.gather(*tasks)

    assert sorted(result.created for result in results) == [False, False, False, True]
    assert len({result.session.session_id for result in results}) == 1

    async with SessionLocal() as session:
        live_count = await session.scalar(
            select(func.count()).select_from(GameSession).where(GameSession.finished_at.is_(None))
        )
    assert live_count == 1


@pytest.mark.asyncio
async def test_parallel_take_money_pays_once() -> None:
    now_utc = datetime.now(UTC)
    await _seed_bank(now_utc=now_utc)
    user_id = await _create_player("cash out", now_utc=now_utc)

    async with SessionLocal.begin() as session:
        created = await GameSessionService.create_session_for_player(session, user_id=user_id, now_utc=now_utc)
    session_id = created.session.session_id

    async with SessionLocal() as session:
        game_session = await GameSessionsRepo.get_by_id(session, session_id)
        assert game_session is not None and game_session.current_game_question is not None
        letter = game_session.current_game_question.correct_answer_key()
    async with SessionLocal.begin() as session:
        await GameSessionService.answer_current_question(
            session,
            user_id=user_id,
            session_id=session_id,
            letter=letter,
            now_utc=now_utc,
        )

    barrier = asyncio.Event()

    async def _attempt() -> TakeMoneyResult:
        await barrier.wait()
        async with SessionLocal.begin() as session:
            return await GameSessionService.take_money(
                session,
                user_id=user_id,
                session_id=session_id,
                now_utc=now_utc,
            )

    tasks = [asyncio.create_task(_attempt()) for _ in range(3)]
    barrier.set()
    results = await asyncio.gather(*tasks)

    assert sorted(result.applied for result in results) == [False, False, True]
    assert {result.prize for result in results} == {100}

    async with SessionLocal() as session:
        user = await UsersRepo.get_by_id(session, user_id)
        entry_count = await session.scalar(select(func.count()).select_from(LedgerEntry))
    assert user is not None and user.balance == 100
    assert entry_count == 1
