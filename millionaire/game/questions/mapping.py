from __future__ import annotations

import random
from dataclasses import dataclass

from millionaire.game.questions.errors import GameQuestionValidationError
from millionaire.game.questions.types import ANSWER_LETTERS, ANSWER_SLOTS, CORRECT_ANSWER_SLOT


@dataclass(frozen=True, slots=True)
class AnswerMapping:
    """Per-session shuffle: which bank answer slot each letter shows."""

    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        slots = self.as_tuple()
        for letter, slot in zip(ANSWER_LETTERS, slots):
            if isinstance(slot, bool) or not isinstance(slot, int) or slot not in ANSWER_SLOTS:
                raise GameQuestionValidationError(f"slot for '{letter}' must be within 1..4, got {slot!r}")
        if sorted(slots) != list(ANSWER_SLOTS):
            raise GameQuestionValidationError(f"answer slots must be a permutation of 1..4, got {slots}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def as_dict(self) -> dict[str, int]:
        return dict(zip(ANSWER_LETTERS, self.as_tuple()))

    def slot_for(self, letter: str) -> int:
        return self.as_dict()[letter]

    def correct_answer_key(self) -> str:
        for letter, slot in self.as_dict().items():
            if slot == CORRECT_ANSWER_SLOT:
                return letter
        raise GameQuestionValidationError("mapping has no correct answer slot")


def random_answer_mapping(rng: random.Random | None = None) -> AnswerMapping:
    slots = list(ANSWER_SLOTS)
    (rng or random).shuffle(slots)
    return AnswerMapping(*slots)


def normalize_letter(letter: object) -> str | None:
    if not isinstance(letter, str):
        return None
    normalized = letter.strip().lower()
    if normalized not in ANSWER_LETTERS:
        return None
    return normalized
