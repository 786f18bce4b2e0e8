from __future__ import annotations

from millionaire.game.prizes import MAX_LEVEL, MIN_LEVEL, is_valid_level
from millionaire.game.questions.errors import QuestionValidationError

ANSWER_LETTERS: tuple[str, str, str, str] = ("a", "b", "c", "d")
ANSWER_SLOTS: tuple[int, int, int, int] = (1, 2, 3, 4)
CORRECT_ANSWER_SLOT = 1


def validate_question_fields(*, text: str, answers: tuple[str, ...], level: int) -> None:
    if not text or not text.strip():
        raise QuestionValidationError("question text is required")
    if len(answers) != len(ANSWER_SLOTS):
        raise QuestionValidationError("a question needs exactly four answers")
    if any(not answer or not answer.strip() for answer in answers):
        raise QuestionValidationError("answers must not be empty")
    if isinstance(level, bool) or not isinstance(level, int) or not is_valid_level(level):
        raise QuestionValidationError(f"level must be within {MIN_LEVEL}..{MAX_LEVEL}, got {level!r}")
