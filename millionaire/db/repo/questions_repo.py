from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.questions import Question


class QuestionsRepo:
    @staticmethod
    async def create(
        session: AsyncSession,
        *,
        text: str,
        answers: tuple[str, str, str, str],
        level: int,
        now_utc: datetime,
    ) -> Question:
        """Raises ``IntegrityError`` (savepoint already rolled back) on a case-insensitive text clash."""
        question = Question(
            text=text,
            answer1=answers[0],
            answer2=answers[1],
            answer3=answers[2],
            answer4=answers[3],
            level=level,
            created_at=now_utc,
        )
        async with session.begin_nested():
            session.add(question)
            await session.flush()
        return question

    @staticmethod
    async def list_ids_by_level(
        session: AsyncSession,
        *,
        levels: Sequence[int],
    ) -> dict[int, list[int]]:
        if not levels:
            return {}
        stmt = (
            select(Question.level, Question.id)
            .where(Question.level.in_(tuple(levels)))
            .order_by(Question.level.asc(), Question.id.asc())
        )
        result = await session.execute(stmt)
        ids_by_level: dict[int, list[int]] = {level: [] for level in levels}
        for level, question_id in result.all():
            ids_by_level[int(level)].append(int(question_id))
        return ids_by_level

    @staticmethod
    async def list_by_ids(session: AsyncSession, *, question_ids: Sequence[int]) -> list[Question]:
        if not question_ids:
            return []
        stmt = select(Question).where(Question.id.in_(tuple(question_ids)))
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def count_by_level(session: AsyncSession) -> dict[int, int]:
        stmt = select(Question.level, func.count()).group_by(Question.level)
        result = await session.execute(stmt)
        return {int(level): int(total) for level, total in result.all()}
