from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from millionaire.db.models.questions import Question
from millionaire.db.session import SessionLocal
from millionaire.game.questions.bank import QuestionBank
from millionaire.game.questions.errors import QuestionValidationError

UTC = timezone.utc


@pytest.mark.asyncio
async def test_duplicate_text_ignoring_case_is_rejected_and_transaction_survives() -> None:
    now_utc = datetime.now(UTC)

    async with SessionLocal.begin() as session:
        await QuestionBank.add_question(
            session,
            text="Capital of France?",
            answers=("Paris", "Lyon", "Nice", "Lille"),
            level=2,
            now_utc=now_utc,
        )
        with pytest.raises(QuestionValidationError, match="already exists"):
            await QuestionBank.add_question(
                session,
                text="capital of FRANCE?",
                answers=("Paris", "Marseille", "Nice", "Lille"),
                level=3,
                now_utc=now_utc,
            )
        await QuestionBank.add_question(
            session,
            text="Capital of Italy?",
            answers=("Rome", "Milan", "Turin", "Naples"),
            level=3,
            now_utc=now_utc,
        )

    async with SessionLocal() as session:
        texts = (await session.execute(select(Question.text).order_by(Question.id))).scalars().all()
        total = await session.scalar(select(func.count()).select_from(Question))
    assert texts == ["Capital of France?", "Capital of Italy?"]
    assert total == 2
