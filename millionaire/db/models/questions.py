from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from millionaire.db.models.base import Base


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (
        sa.CheckConstraint("level >= 0 AND level <= 14", name="ck_questions_level_range"),
        sa.Index("idx_questions_level", "level"),
    )

    id: Mapped[int] = mapped_column(sa.BigInteger, primary_key=True)
    text: Mapped[str] = mapped_column(sa.Text, nullable=False)
    answer1: Mapped[str] = mapped_column(sa.Text, nullable=False)
    answer2: Mapped[str] = mapped_column(sa.Text, nullable=False)
    answer3: Mapped[str] = mapped_column(sa.Text, nullable=False)
    answer4: Mapped[str] = mapped_column(sa.Text, nullable=False)
    level: Mapped[int] = mapped_column(sa.SmallInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("now()"),
    )

    def answer_for_slot(self, slot: int) -> str:
        answers = (self.answer1, self.answer2, self.answer3, self.answer4)
        if not 1 <= slot <= len(answers):
            raise ValueError(f"answer slot must be within 1..4, got {slot}")
        return answers[slot - 1]


sa.Index("uq_questions_text_lower", sa.func.lower(Question.text), unique=True)
