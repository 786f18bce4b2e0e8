from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

from millionaire.game.hints.types import HintType
from millionaire.game.prizes import MAX_LEVEL, PRIZES, fireproof_prize
from millionaire.game.sessions.errors import HintAlreadyUsedError, NothingToBankError
from millionaire.game.sessions.types import AnswerOutcome, GameSnapshot, GameStatus

DEFAULT_TIME_LIMIT = timedelta(minutes=35)


def is_time_over(snapshot: GameSnapshot, *, now_utc: datetime, time_limit: timedelta = DEFAULT_TIME_LIMIT) -> bool:
    return now_utc - snapshot.created_at > time_limit


def derive_status(
    snapshot: GameSnapshot,
    *,
    now_utc: datetime,
    time_limit: timedelta = DEFAULT_TIME_LIMIT,
) -> GameStatus:
    if snapshot.finished_at is None:
        return GameStatus.IN_PROGRESS
    if snapshot.is_failed:
        # Clock is re-read on every call, so a late read turns "fail" into "timeout".
        if is_time_over(snapshot, now_utc=now_utc, time_limit=time_limit):
            return GameStatus.TIMEOUT
        return GameStatus.FAIL
    if snapshot.current_level > MAX_LEVEL:
        return GameStatus.WON
    return GameStatus.MONEY


def finish_game(snapshot: GameSnapshot, *, prize: int, failed: bool, now_utc: datetime) -> GameSnapshot:
    if snapshot.finished_at is not None:
        raise ValueError("game is already finished")
    if prize < 0:
        raise ValueError("prize must not be negative")
    return replace(snapshot, prize=prize, is_failed=failed, finished_at=now_utc)


def expire_if_due(
    snapshot: GameSnapshot,
    *,
    now_utc: datetime,
    time_limit: timedelta = DEFAULT_TIME_LIMIT,
) -> tuple[GameSnapshot, bool]:
    if snapshot.finished or not is_time_over(snapshot, now_utc=now_utc, time_limit=time_limit):
        return snapshot, False
    expired = finish_game(
        snapshot,
        prize=fireproof_prize(snapshot.previous_level),
        failed=True,
        now_utc=now_utc,
    )
    return expired, True


def apply_answer(snapshot: GameSnapshot, *, is_correct: bool, now_utc: datetime) -> tuple[GameSnapshot, AnswerOutcome]:
    if snapshot.finished:
        raise ValueError("cannot answer a finished game")

    if not is_correct:
        failed = finish_game(
            snapshot,
            prize=fireproof_prize(snapshot.previous_level),
            failed=True,
            now_utc=now_utc,
        )
        return failed, AnswerOutcome.FAILED

    advanced = replace(snapshot, current_level=snapshot.current_level + 1)
    if snapshot.current_level == MAX_LEVEL:
        won = finish_game(advanced, prize=PRIZES[MAX_LEVEL], failed=False, now_utc=now_utc)
        return won, AnswerOutcome.WON
    return advanced, AnswerOutcome.ADVANCED


def apply_take_money(snapshot: GameSnapshot, *, now_utc: datetime) -> GameSnapshot:
    if snapshot.finished:
        raise ValueError("cannot bank a finished game")
    if snapshot.current_level <= 0:
        raise NothingToBankError
    return finish_game(snapshot, prize=PRIZES[snapshot.previous_level], failed=False, now_utc=now_utc)


def mark_hint_used(snapshot: GameSnapshot, hint_type: HintType) -> GameSnapshot:
    if snapshot.finished:
        raise ValueError("cannot use a hint in a finished game")
    if snapshot.hint_used(hint_type):
        raise HintAlreadyUsedError(hint_type.value)
    if hint_type == HintType.AUDIENCE_HELP:
        return replace(snapshot, audience_help_used=True)
    if hint_type == HintType.FIFTY_FIFTY:
        return replace(snapshot, fifty_fifty_used=True)
    return replace(snapshot, friend_call_used=True)
