from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    ForeignKey,
    Index,
    SmallInteger,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from millionaire.db.models.base import Base
from millionaire.db.models.questions import Question
from millionaire.game.hints.types import HintState
from millionaire.game.prizes import is_valid_level
from millionaire.game.questions.errors import GameQuestionValidationError
from millionaire.game.questions.mapping import AnswerMapping, normalize_letter
from millionaire.game.questions.types import ANSWER_LETTERS

if TYPE_CHECKING:
    from millionaire.db.models.game_sessions import GameSession


class GameQuestion(Base):
    """One rung of a session's ladder: a bank question behind a per-session letter shuffle."""

    __tablename__ = "game_questions"
    __table_args__ = (
        CheckConstraint(
            "slot_a BETWEEN 1 AND 4 AND slot_b BETWEEN 1 AND 4 "
            "AND slot_c BETWEEN 1 AND 4 AND slot_d BETWEEN 1 AND 4",
            name="ck_game_questions_slot_range",
        ),
        # Within 1..4 only {1,2,3,4} has sum 10 and product 24.
        CheckConstraint(
            "slot_a + slot_b + slot_c + slot_d = 10 AND slot_a * slot_b * slot_c * slot_d = 24",
            name="ck_game_questions_slot_permutation",
        ),
        CheckConstraint("position >= 0 AND position <= 14", name="ck_game_questions_position_range"),
        UniqueConstraint("game_session_id", "position", name="uq_game_questions_session_position"),
        Index("idx_game_questions_question", "question_id"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    game_session_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
    )
    question_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("questions.id"), nullable=False)
    position: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_a: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_b: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_c: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_d: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    hint_payload: Mapped[dict[str, object]] = mapped_column(
        "hint_state",
        JSONB,
        nullable=False,
        server_default=text("'{}'::jsonb"),
    )

    game_session: Mapped[GameSession] = relationship(back_populates="questions", lazy="raise")
    question: Mapped[Question] = relationship(lazy="raise")

    @classmethod
    def build(
        cls,
        *,
        game_session: GameSession | None,
        question: Question | None,
        mapping: AnswerMapping,
    ) -> GameQuestion:
        if game_session is None:
            raise GameQuestionValidationError("game question needs a game session")
        if question is None:
            raise GameQuestionValidationError("game question needs a bank question")
        if not is_valid_level(question.level):
            raise GameQuestionValidationError(f"bank question level {question.level} is out of range")
        return cls(
            game_session=game_session,
            question=question,
            position=question.level,
            slot_a=mapping.a,
            slot_b=mapping.b,
            slot_c=mapping.c,
            slot_d=mapping.d,
            hint_payload={},
        )

    @property
    def answer_mapping(self) -> AnswerMapping:
        return AnswerMapping(self.slot_a, self.slot_b, self.slot_c, self.slot_d)

    @property
    def text(self) -> str:
        return self.question.text

    @property
    def level(self) -> int:
        return self.question.level

    @property
    def hints(self) -> HintState:
        return HintState.from_payload(self.hint_payload)

    @hints.setter
    def hints(self, state: HintState) -> None:
        # JSONB is not mutation-tracked; always assign a fresh dict.
        self.hint_payload = state.to_payload()

    def variants(self) -> dict[str, str]:
        mapping = self.answer_mapping.as_dict()
        return {letter: self.question.answer_for_slot(mapping[letter]) for letter in ANSWER_LETTERS}

    def correct_answer_key(self) -> str:
        return self.answer_mapping.correct_answer_key()

    def correct_answer(self) -> str:
        return self.variants()[self.correct_answer_key()]

    def answer_correct(self, letter: str) -> bool:
        return normalize_letter(letter) == self.correct_answer_key()
