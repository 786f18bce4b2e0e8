from __future__ import annotations

import pytest

from millionaire.game.prizes import (
    FIREPROOF_LEVELS,
    MAX_LEVEL,
    PRIZES,
    QUESTION_LEVELS,
    fireproof_prize,
    is_valid_level,
    prize_for_level,
)


def test_prize_table_has_fifteen_increasing_rungs() -> None:
    assert len(PRIZES) == len(QUESTION_LEVELS) == 15
    assert PRIZES[0] == 100
    assert PRIZES[MAX_LEVEL] == 1_000_000
    assert list(PRIZES) == sorted(PRIZES)
    assert len(set(PRIZES)) == len(PRIZES)


def test_fireproof_levels_are_fifth_tenth_and_last() -> None:
    assert FIREPROOF_LEVELS == (4, 9, 14)
    assert [PRIZES[level] for level in FIREPROOF_LEVELS] == [1_000, 32_000, 1_000_000]


@pytest.mark.parametrize("level", [-1, 15, 100])
def test_prize_for_level_rejects_out_of_range(level: int) -> None:
    assert is_valid_level(level) is False
    with pytest.raises(ValueError):
        prize_for_level(level)


def test_prize_for_level_reads_the_table() -> None:
    assert prize_for_level(4) == 1_000
    assert prize_for_level(10) == 64_000


@pytest.mark.parametrize(
    ("answered_level", "expected"),
    [
        (-1, 0),
        (0, 0),
        (3, 0),
        (4, 1_000),
        (8, 1_000),
        (9, 32_000),
        (13, 32_000),
        (14, 1_000_000),
    ],
)
def test_fireproof_prize_keeps_last_reached_checkpoint(answered_level: int, expected: int) -> None:
    assert fireproof_prize(answered_level) == expected
