from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.game.sessions.rules import apply_take_money
from millionaire.game.sessions.types import TakeMoneyResult

from .sessions_finish import _expire_if_due, _load_owned_session_for_update, _store_snapshot
from .snapshot import _build_session_view, _snapshot_from_model


async def take_money(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
    now_utc: datetime,
) -> TakeMoneyResult:
    game_session = await _load_owned_session_for_update(session, user_id=user_id, session_id=session_id)

    if game_session.finished or await _expire_if_due(session, game_session=game_session, now_utc=now_utc):
        return TakeMoneyResult(
            session=_build_session_view(game_session, now_utc=now_utc),
            applied=False,
            prize=game_session.prize,
        )

    snapshot = apply_take_money(_snapshot_from_model(game_session), now_utc=now_utc)
    await _store_snapshot(session, game_session=game_session, snapshot=snapshot, now_utc=now_utc)
    return TakeMoneyResult(
        session=_build_session_view(game_session, now_utc=now_utc),
        applied=True,
        prize=game_session.prize,
    )
