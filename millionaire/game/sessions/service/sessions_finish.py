from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.game_sessions import GameSession
from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.economy.ledger.service import LedgerService
from millionaire.game.sessions.errors import SessionNotFoundError
from millionaire.game.sessions.rules import derive_status, expire_if_due
from millionaire.game.sessions.types import GameSnapshot

from .constants import GAME_TIME_LIMIT
from .snapshot import _apply_snapshot_to_model, _snapshot_from_model

logger = structlog.get_logger("millionaire.game.sessions.finish")


async def _load_owned_session_for_update(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
) -> GameSession:
    game_session = await GameSessionsRepo.get_by_id_for_update(session, session_id)
    if game_session is None or game_session.user_id != user_id:
        raise SessionNotFoundError
    return game_session


async def _store_snapshot(
    session: AsyncSession,
    *,
    game_session: GameSession,
    snapshot: GameSnapshot,
    now_utc: datetime,
) -> None:
    """Persist a transition; pays out the prize when the transition finished the game."""
    was_finished = game_session.finished
    _apply_snapshot_to_model(game_session, snapshot, now_utc)
    await session.flush()

    if was_finished or not game_session.finished:
        return

    await LedgerService.credit_game_prize(
        session,
        user_id=game_session.user_id,
        game_session_id=game_session.id,
        amount=game_session.prize,
        now_utc=now_utc,
    )
    logger.info(
        "game_session_finished",
        user_id=game_session.user_id,
        game_session_id=str(game_session.id),
        status=derive_status(snapshot, now_utc=now_utc, time_limit=GAME_TIME_LIMIT).value,
        current_level=game_session.current_level,
        prize=game_session.prize,
    )


async def _expire_if_due(
    session: AsyncSession,
    *,
    game_session: GameSession,
    now_utc: datetime,
) -> bool:
    snapshot, expired = expire_if_due(
        _snapshot_from_model(game_session),
        now_utc=now_utc,
        time_limit=GAME_TIME_LIMIT,
    )
    if not expired:
        return False
    await _store_snapshot(session, game_session=game_session, snapshot=snapshot, now_utc=now_utc)
    return True
