from __future__ import annotations

import random

from millionaire.game.questions.types import ANSWER_LETTERS

AUDIENCE_VOTE_CEILING = 100
FRIEND_NAMES: tuple[str, ...] = (
    "Alex",
    "Maria",
    "Uncle Pete",
    "Professor Klein",
    "Your neighbour Sam",
    "Grandma Rosa",
)


def audience_distribution(rng: random.Random | None = None) -> dict[str, int]:
    source = rng or random
    return {letter: source.randrange(AUDIENCE_VOTE_CEILING) for letter in ANSWER_LETTERS}


def fifty_fifty_keys(correct_key: str, rng: random.Random | None = None) -> tuple[str, str]:
    if correct_key not in ANSWER_LETTERS:
        raise ValueError(f"unknown answer letter {correct_key!r}")
    wrong_keys = [letter for letter in ANSWER_LETTERS if letter != correct_key]
    kept_wrong = (rng or random).choice(wrong_keys)
    first, second = sorted((correct_key, kept_wrong))
    return first, second


def friend_call_text(
    correct_key: str,
    *,
    visible_keys: tuple[str, ...] = ANSWER_LETTERS,
    accuracy: float = 0.8,
    rng: random.Random | None = None,
) -> str:
    source = rng or random
    if correct_key not in visible_keys:
        raise ValueError(f"correct answer {correct_key!r} is not among visible keys {visible_keys}")

    guess = correct_key
    wrong_keys = [letter for letter in visible_keys if letter != correct_key]
    if wrong_keys and source.random() >= accuracy:
        guess = source.choice(wrong_keys)

    friend = source.choice(FRIEND_NAMES)
    return f"{friend} thinks the right answer is {guess.upper()}"
