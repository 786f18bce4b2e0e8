from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.game.questions.mapping import normalize_letter
from millionaire.game.sessions.errors import InvalidAnswerLetterError
from millionaire.game.sessions.rules import apply_answer
from millionaire.game.sessions.types import AnswerResult

from .sessions_finish import _expire_if_due, _load_owned_session_for_update, _store_snapshot
from .snapshot import _build_session_view, _snapshot_from_model

logger = structlog.get_logger("millionaire.game.sessions.answer")


async def answer_current_question(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
    letter: str,
    now_utc: datetime,
) -> AnswerResult:
    normalized_letter = normalize_letter(letter)
    if normalized_letter is None:
        raise InvalidAnswerLetterError(letter)

    game_session = await _load_owned_session_for_update(session, user_id=user_id, session_id=session_id)

    if game_session.finished or await _expire_if_due(session, game_session=game_session, now_utc=now_utc):
        return AnswerResult(
            session=_build_session_view(game_session, now_utc=now_utc),
            applied=False,
            is_correct=False,
        )

    game_question = game_session.current_game_question
    assert game_question is not None
    correct_key = game_question.correct_answer_key()
    is_correct = normalized_letter == correct_key

    snapshot, outcome = apply_answer(
        _snapshot_from_model(game_session),
        is_correct=is_correct,
        now_utc=now_utc,
    )
    await _store_snapshot(session, game_session=game_session, snapshot=snapshot, now_utc=now_utc)

    logger.info(
        "game_session_answered",
        user_id=user_id,
        game_session_id=str(game_session.id),
        level=game_question.position,
        letter=normalized_letter,
        outcome=outcome.value,
    )
    return AnswerResult(
        session=_build_session_view(game_session, now_utc=now_utc),
        applied=True,
        is_correct=is_correct,
        correct_answer_key=correct_key,
        correct_answer_text=game_question.correct_answer(),
    )
