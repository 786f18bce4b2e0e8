from __future__ import annotations

QUESTION_LEVELS: tuple[int, ...] = tuple(range(15))
MIN_LEVEL = QUESTION_LEVELS[0]
MAX_LEVEL = QUESTION_LEVELS[-1]

PRIZES: tuple[int, ...] = (
    100,
    200,
    300,
    500,
    1_000,
    2_000,
    4_000,
    8_000,
    16_000,
    32_000,
    64_000,
    125_000,
    250_000,
    500_000,
    1_000_000,
)
FIREPROOF_LEVELS: tuple[int, ...] = (4, 9, 14)


def is_valid_level(level: int) -> bool:
    return MIN_LEVEL <= level <= MAX_LEVEL


def prize_for_level(level: int) -> int:
    if not is_valid_level(level):
        raise ValueError(f"no prize defined for level {level}")
    return PRIZES[level]


def fireproof_prize(answered_level: int) -> int:
    """Prize kept after a wrong answer once ``answered_level`` was fully answered.

    ``answered_level`` is -1 when nothing has been answered yet.
    """
    reached = [level for level in FIREPROOF_LEVELS if level <= answered_level]
    if not reached:
        return 0
    return PRIZES[reached[-1]]
