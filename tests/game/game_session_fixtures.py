from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from millionaire.db.models.game_questions import GameQuestion
from millionaire.db.models.game_sessions import GameSession
from millionaire.db.models.questions import Question
from millionaire.game.prizes import QUESTION_LEVELS
from millionaire.game.questions.mapping import AnswerMapping

UTC = timezone.utc
STARTED_AT = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

# Correct answer sits behind letter "b".
LADDER_MAPPING = AnswerMapping(2, 1, 4, 3)


class FakeSession:
    def __init__(self) -> None:
        self.flushes = 0

    async def flush(self) -> None:
        self.flushes += 1


def _bank_question(level: int) -> Question:
    return Question(
        id=100 + level,
        text=f"Ladder question {level}?",
        answer1=f"right {level}",
        answer2=f"wrong {level}.1",
        answer3=f"wrong {level}.2",
        answer4=f"wrong {level}.3",
        level=level,
    )


def _bank_ladder() -> list[Question]:
    return [_bank_question(level) for level in QUESTION_LEVELS]


def _game_session(
    *,
    user_id: int = 1,
    current_level: int = 0,
    created_at: datetime = STARTED_AT,
    finished_at: datetime | None = None,
    is_failed: bool = False,
    prize: int = 0,
) -> GameSession:
    game_session = GameSession(
        id=uuid4(),
        user_id=user_id,
        current_level=current_level,
        is_failed=is_failed,
        prize=prize,
        audience_help_used=False,
        fifty_fifty_used=False,
        friend_call_used=False,
        created_at=created_at,
        finished_at=finished_at,
        updated_at=created_at,
        version=0,
    )
    for question in _bank_ladder():
        GameQuestion.build(game_session=game_session, question=question, mapping=LADDER_MAPPING)
    return game_session
