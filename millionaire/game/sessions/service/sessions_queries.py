from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.game.sessions.errors import SessionNotFoundError
from millionaire.game.sessions.types import GameSessionView

from .constants import SESSION_HISTORY_LIMIT
from .snapshot import _build_session_view


async def get_session_for_player(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
    now_utc: datetime,
) -> GameSessionView:
    game_session = await GameSessionsRepo.get_by_id(session, session_id)
    if game_session is None or game_session.user_id != user_id:
        raise SessionNotFoundError
    return _build_session_view(game_session, now_utc=now_utc)


async def get_active_session_for_player(
    session: AsyncSession,
    *,
    user_id: int,
    now_utc: datetime,
) -> GameSessionView | None:
    game_session = await GameSessionsRepo.get_active_for_user(session, user_id=user_id)
    if game_session is None:
        return None
    return _build_session_view(game_session, now_utc=now_utc)


async def list_sessions_for_player(
    session: AsyncSession,
    *,
    user_id: int,
    now_utc: datetime,
    limit: int = SESSION_HISTORY_LIMIT,
) -> list[GameSessionView]:
    game_sessions = await GameSessionsRepo.list_for_user(session, user_id=user_id, limit=limit)
    return [_build_session_view(game_session, now_utc=now_utc) for game_session in game_sessions]
