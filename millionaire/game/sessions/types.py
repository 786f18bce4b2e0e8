from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from millionaire.game.hints.types import HintState, HintType


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    FAIL = "fail"
    MONEY = "money"
    TIMEOUT = "timeout"


class AnswerOutcome(str, Enum):
    ADVANCED = "advanced"
    WON = "won"
    FAILED = "failed"


@dataclass(slots=True)
class GameSnapshot:
    current_level: int
    is_failed: bool
    finished_at: datetime | None
    prize: int
    created_at: datetime
    audience_help_used: bool = False
    fifty_fifty_used: bool = False
    friend_call_used: bool = False

    @property
    def finished(self) -> bool:
        return self.finished_at is not None

    @property
    def previous_level(self) -> int:
        return self.current_level - 1

    def hint_used(self, hint_type: HintType) -> bool:
        if hint_type == HintType.AUDIENCE_HELP:
            return self.audience_help_used
        if hint_type == HintType.FIFTY_FIFTY:
            return self.fifty_fifty_used
        return self.friend_call_used


@dataclass(slots=True)
class GameQuestionView:
    position: int
    level: int
    text: str
    variants: dict[str, str]
    hints: HintState


@dataclass(slots=True)
class GameSessionView:
    session_id: UUID
    user_id: int
    status: GameStatus
    current_level: int
    prize: int
    is_failed: bool
    created_at: datetime
    finished_at: datetime | None
    expires_at: datetime
    audience_help_used: bool
    fifty_fifty_used: bool
    friend_call_used: bool
    current_question: GameQuestionView | None = None


@dataclass(slots=True)
class CreateSessionResult:
    session: GameSessionView
    created: bool


@dataclass(slots=True)
class AnswerResult:
    session: GameSessionView
    applied: bool
    is_correct: bool
    correct_answer_key: str | None = None
    correct_answer_text: str | None = None


@dataclass(slots=True)
class TakeMoneyResult:
    session: GameSessionView
    applied: bool
    prize: int


@dataclass(slots=True)
class HintResult:
    session: GameSessionView
    applied: bool
    hint_type: HintType
    hints: HintState | None = None
