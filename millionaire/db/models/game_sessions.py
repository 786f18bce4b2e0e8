from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    text,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from millionaire.db.models.base import Base
from millionaire.db.models.game_questions import GameQuestion


class GameSession(Base):
    __tablename__ = "game_sessions"
    __table_args__ = (
        CheckConstraint(
            "current_level >= 0 AND current_level <= 15",
            name="ck_game_sessions_current_level_range",
        ),
        CheckConstraint("prize >= 0", name="ck_game_sessions_prize_non_negative"),
        CheckConstraint(
            "(NOT is_failed) OR finished_at IS NOT NULL",
            name="ck_game_sessions_failed_is_finished",
        ),
        CheckConstraint("version >= 0", name="ck_game_sessions_version_non_negative"),
        Index("idx_game_sessions_user_created", "user_id", "created_at"),
        Index(
            "uq_game_sessions_user_active",
            "user_id",
            unique=True,
            postgresql_where=text("finished_at IS NULL"),
        ),
    )

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    user_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("users.id"), nullable=False)
    current_level: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    is_failed: Mapped[bool] = mapped_column(Boolean, nullable=False)
    prize: Mapped[int] = mapped_column(BigInteger, nullable=False)
    audience_help_used: Mapped[bool] = mapped_column(Boolean, nullable=False)
    fifty_fifty_used: Mapped[bool] = mapped_column(Boolean, nullable=False)
    friend_call_used: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    finished_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    questions: Mapped[list[GameQuestion]] = relationship(
        back_populates="game_session",
        order_by="GameQuestion.position",
        cascade="all, delete-orphan",
        lazy="raise",
    )

    @property
    def finished(self) -> bool:
        return self.finished_at is not None

    @property
    def previous_level(self) -> int:
        return self.current_level - 1

    @property
    def current_game_question(self) -> GameQuestion | None:
        if self.current_level >= len(self.questions):
            return None
        return self.questions[self.current_level]

    @property
    def previous_game_question(self) -> GameQuestion | None:
        if self.previous_level < 0:
            return None
        return self.questions[self.previous_level]
