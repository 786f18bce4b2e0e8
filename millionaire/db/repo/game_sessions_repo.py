from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from millionaire.db.models.game_questions import GameQuestion
from millionaire.db.models.game_sessions import GameSession


def _with_ladder():
    return selectinload(GameSession.questions).joinedload(GameQuestion.question)


class GameSessionsRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, session_id: UUID) -> GameSession | None:
        stmt = select(GameSession).where(GameSession.id == session_id).options(_with_ladder())
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_id_for_update(session: AsyncSession, session_id: UUID) -> GameSession | None:
        stmt = (
            select(GameSession)
            .where(GameSession.id == session_id)
            .options(_with_ladder())
            .with_for_update(of=GameSession)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_active_for_user(session: AsyncSession, *, user_id: int) -> GameSession | None:
        stmt = (
            select(GameSession)
            .where(
                GameSession.user_id == user_id,
                GameSession.finished_at.is_(None),
            )
            .options(_with_ladder())
            .order_by(GameSession.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_for_user(session: AsyncSession, *, user_id: int, limit: int = 50) -> list[GameSession]:
        stmt = (
            select(GameSession)
            .where(GameSession.user_id == user_id)
            .options(_with_ladder())
            .order_by(GameSession.created_at.desc(), GameSession.id.asc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def create_with_questions(session: AsyncSession, *, game_session: GameSession) -> GameSession:
        """Insert the session and its ladder in one savepoint.

        Raises ``IntegrityError`` (savepoint already rolled back) when the player
        got a live session concurrently.
        """
        async with session.begin_nested():
            session.add(game_session)
            await session.flush()
        return game_session
