from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from datetime import datetime

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.questions import Question
from millionaire.db.repo.questions_repo import QuestionsRepo
from millionaire.game.prizes import QUESTION_LEVELS
from millionaire.game.questions.errors import QuestionValidationError
from millionaire.game.questions.types import validate_question_fields
from millionaire.game.sessions.errors import InsufficientQuestionsError

logger = structlog.get_logger("millionaire.game.questions.bank")


def missing_levels(counts_by_level: Mapping[int, int], levels: Sequence[int] = QUESTION_LEVELS) -> list[int]:
    return [level for level in levels if counts_by_level.get(level, 0) <= 0]


class QuestionBank:
    @staticmethod
    async def add_question(
        session: AsyncSession,
        *,
        text: str,
        answers: tuple[str, str, str, str],
        level: int,
        now_utc: datetime,
    ) -> Question:
        validate_question_fields(text=text, answers=answers, level=level)
        try:
            return await QuestionsRepo.create(
                session,
                text=text.strip(),
                answers=answers,
                level=level,
                now_utc=now_utc,
            )
        except IntegrityError as exc:
            logger.info("question_bank_duplicate_text", level=level)
            raise QuestionValidationError("question text already exists") from exc

    @staticmethod
    async def sample_ladder(
        session: AsyncSession,
        *,
        levels: Sequence[int] = QUESTION_LEVELS,
        rng: random.Random | None = None,
    ) -> list[Question]:
        """Pick one bank item per level, uniformly among that level's items, in ``levels`` order."""
        source = rng or random
        ids_by_level = await QuestionsRepo.list_ids_by_level(session, levels=levels)

        chosen_ids: list[int] = []
        for level in levels:
            candidates = [qid for qid in ids_by_level.get(level, []) if qid not in chosen_ids]
            if not candidates:
                logger.warning("question_bank_level_empty", level=level)
                raise InsufficientQuestionsError(level)
            chosen_ids.append(source.choice(candidates))

        records = await QuestionsRepo.list_by_ids(session, question_ids=chosen_ids)
        by_id = {record.id: record for record in records}
        return [by_id[question_id] for question_id in chosen_ids]

    @staticmethod
    async def sample(
        session: AsyncSession,
        *,
        level: int,
        rng: random.Random | None = None,
    ) -> Question:
        ladder = await QuestionBank.sample_ladder(session, levels=(level,), rng=rng)
        return ladder[0]

    @staticmethod
    async def missing_levels(session: AsyncSession) -> list[int]:
        counts = await QuestionsRepo.count_by_level(session)
        return missing_levels(counts)
