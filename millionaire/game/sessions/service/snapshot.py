from __future__ import annotations

from datetime import datetime

from millionaire.db.models.game_questions import GameQuestion
from millionaire.db.models.game_sessions import GameSession
from millionaire.game.sessions.rules import derive_status
from millionaire.game.sessions.types import GameQuestionView, GameSessionView, GameSnapshot

from .constants import GAME_TIME_LIMIT


def _snapshot_from_model(game_session: GameSession) -> GameSnapshot:
    return GameSnapshot(
        current_level=game_session.current_level,
        is_failed=game_session.is_failed,
        finished_at=game_session.finished_at,
        prize=game_session.prize,
        created_at=game_session.created_at,
        audience_help_used=game_session.audience_help_used,
        fifty_fifty_used=game_session.fifty_fifty_used,
        friend_call_used=game_session.friend_call_used,
    )


def _apply_snapshot_to_model(game_session: GameSession, snapshot: GameSnapshot, now_utc: datetime) -> None:
    if snapshot.current_level < game_session.current_level:
        raise ValueError("current level must never decrease")
    if game_session.finished_at is not None and snapshot.finished_at != game_session.finished_at:
        raise ValueError("finished_at must never change once set")
    game_session.current_level = snapshot.current_level
    game_session.is_failed = snapshot.is_failed
    game_session.finished_at = snapshot.finished_at
    game_session.prize = snapshot.prize
    game_session.audience_help_used = snapshot.audience_help_used
    game_session.fifty_fifty_used = snapshot.fifty_fifty_used
    game_session.friend_call_used = snapshot.friend_call_used
    game_session.updated_at = now_utc
    game_session.version += 1


def _build_question_view(game_question: GameQuestion) -> GameQuestionView:
    return GameQuestionView(
        position=game_question.position,
        level=game_question.level,
        text=game_question.text,
        variants=game_question.variants(),
        hints=game_question.hints,
    )


def _build_session_view(game_session: GameSession, *, now_utc: datetime) -> GameSessionView:
    snapshot = _snapshot_from_model(game_session)
    current_question = None
    if not game_session.finished:
        game_question = game_session.current_game_question
        if game_question is not None:
            current_question = _build_question_view(game_question)
    return GameSessionView(
        session_id=game_session.id,
        user_id=game_session.user_id,
        status=derive_status(snapshot, now_utc=now_utc, time_limit=GAME_TIME_LIMIT),
        current_level=game_session.current_level,
        prize=game_session.prize,
        is_failed=game_session.is_failed,
        created_at=game_session.created_at,
        finished_at=game_session.finished_at,
        expires_at=game_session.created_at + GAME_TIME_LIMIT,
        audience_help_used=game_session.audience_help_used,
        fifty_fifty_used=game_session.fifty_fifty_used,
        friend_call_used=game_session.friend_call_used,
        current_question=current_question,
    )
