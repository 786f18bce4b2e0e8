from __future__ import annotations

import random
from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.game_questions import GameQuestion
from millionaire.game.hints.rules import audience_distribution, fifty_fifty_keys, friend_call_text
from millionaire.game.hints.types import HintState, HintType
from millionaire.game.questions.types import ANSWER_LETTERS
from millionaire.game.sessions.errors import InvalidHintTypeError
from millionaire.game.sessions.rules import mark_hint_used
from millionaire.game.sessions.types import HintResult

from .constants import FRIEND_CALL_ACCURACY
from .sessions_finish import _expire_if_due, _load_owned_session_for_update, _store_snapshot
from .snapshot import _build_session_view, _snapshot_from_model

logger = structlog.get_logger("millionaire.game.sessions.hints")


def _parse_hint_type(hint_type: HintType | str) -> HintType:
    try:
        return HintType(hint_type)
    except ValueError as exc:
        raise InvalidHintTypeError(hint_type) from exc


def _generate_hint(game_question: GameQuestion, hint_type: HintType, rng: random.Random | None) -> HintState:
    hints = game_question.hints
    correct_key = game_question.correct_answer_key()
    if hint_type == HintType.AUDIENCE_HELP:
        return hints.with_audience_help(audience_distribution(rng))
    if hint_type == HintType.FIFTY_FIFTY:
        return hints.with_fifty_fifty(fifty_fifty_keys(correct_key, rng))
    visible_keys = hints.fifty_fifty or ANSWER_LETTERS
    return hints.with_friend_call(
        friend_call_text(
            correct_key,
            visible_keys=visible_keys,
            accuracy=FRIEND_CALL_ACCURACY,
            rng=rng,
        )
    )


async def use_hint(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
    hint_type: HintType | str,
    now_utc: datetime,
    rng: random.Random | None = None,
) -> HintResult:
    parsed_hint_type = _parse_hint_type(hint_type)
    game_session = await _load_owned_session_for_update(session, user_id=user_id, session_id=session_id)

    if game_session.finished or await _expire_if_due(session, game_session=game_session, now_utc=now_utc):
        return HintResult(
            session=_build_session_view(game_session, now_utc=now_utc),
            applied=False,
            hint_type=parsed_hint_type,
        )

    snapshot = mark_hint_used(_snapshot_from_model(game_session), parsed_hint_type)
    game_question = game_session.current_game_question
    assert game_question is not None
    game_question.hints = _generate_hint(game_question, parsed_hint_type, rng)
    await _store_snapshot(session, game_session=game_session, snapshot=snapshot, now_utc=now_utc)

    logger.info(
        "game_session_hint_used",
        user_id=user_id,
        game_session_id=str(game_session.id),
        hint_type=parsed_hint_type.value,
        level=game_question.position,
    )
    return HintResult(
        session=_build_session_view(game_session, now_utc=now_utc),
        applied=True,
        hint_type=parsed_hint_type,
        hints=game_question.hints,
    )
