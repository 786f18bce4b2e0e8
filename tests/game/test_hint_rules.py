from __future__ import annotations

import random

import pytest

from millionaire.game.hints.rules import (
    FRIEND_NAMES,
    audience_distribution,
    fifty_fifty_keys,
    friend_call_text,
)
from millionaire.game.hints.types import HintState


def test_audience_distribution_covers_every_letter() -> None:
    votes = audience_distribution(random.Random(1))

    assert set(votes) == {"a", "b", "c", "d"}
    assert all(0 <= value < 100 for value in votes.values())


@pytest.mark.parametrize("correct_key", ["a", "b", "c", "d"])
def test_fifty_fifty_keeps_correct_and_one_wrong(correct_key: str) -> None:
    rng = random.Random(7)
    for _ in range(20):
        keys = fifty_fifty_keys(correct_key, rng)
        assert correct_key in keys
        assert len(set(keys)) == 2
        assert list(keys) == sorted(keys)


def test_fifty_fifty_rejects_unknown_letter() -> None:
    with pytest.raises(ValueError):
        fifty_fifty_keys("x")


def test_friend_call_names_a_friend_and_a_letter() -> None:
    message = friend_call_text("c", rng=random.Random(3))

    friend, _, guess = message.partition(" thinks the right answer is ")
    assert friend in FRIEND_NAMES
    assert guess in {"A", "B", "C", "D"}


def test_friend_call_with_full_accuracy_is_always_right() -> None:
    rng = random.Random(11)
    for _ in range(50):
        assert friend_call_text("b", accuracy=1.0, rng=rng).endswith(" B")


def test_friend_call_with_zero_accuracy_never_names_the_correct_letter() -> None:
    rng = random.Random(11)
    for _ in range(50):
        assert not friend_call_text("b", accuracy=0.0, rng=rng).endswith(" B")


def test_friend_call_is_right_about_eighty_percent_of_the_time() -> None:
    rng = random.Random(2024)
    trials = 2_000
    right = sum(friend_call_text("a", rng=rng).endswith(" A") for _ in range(trials))

    assert 0.75 < right / trials < 0.85


def test_friend_call_stays_within_fifty_fifty_keys() -> None:
    rng = random.Random(5)
    for _ in range(50):
        guess = friend_call_text("a", visible_keys=("a", "d"), accuracy=0.0, rng=rng)
        assert guess.endswith(" D")


def test_hint_state_payload_is_reversible() -> None:
    state = (
        HintState()
        .with_audience_help({"a": 10, "b": 55, "c": 3, "d": 90})
        .with_fifty_fifty(("a", "c"))
        .with_friend_call("Alex thinks the right answer is A")
    )

    payload = state.to_payload()

    assert payload == {
        "audience_help": {"a": 10, "b": 55, "c": 3, "d": 90},
        "fifty_fifty": ["a", "c"],
        "friend_call": "Alex thinks the right answer is A",
    }
    assert HintState.from_payload(payload) == state
    assert HintState.from_payload({}).is_empty()
    assert HintState.from_payload(None).is_empty()
