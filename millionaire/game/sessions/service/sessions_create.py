from __future__ import annotations

import random
from datetime import datetime
from uuid import uuid4

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.game_questions import GameQuestion
from millionaire.db.models.game_sessions import GameSession
from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.db.repo.users_repo import UsersRepo
from millionaire.game.questions.bank import QuestionBank
from millionaire.game.questions.mapping import random_answer_mapping
from millionaire.game.sessions.errors import PlayerNotFoundError
from millionaire.game.sessions.types import CreateSessionResult

from .snapshot import _build_session_view

logger = structlog.get_logger("millionaire.game.sessions.create")


async def create_session_for_player(
    session: AsyncSession,
    *,
    user_id: int,
    now_utc: datetime,
    rng: random.Random | None = None,
) -> CreateSessionResult:
    player = await UsersRepo.get_by_id_for_update(session, user_id)
    if player is None:
        raise PlayerNotFoundError

    existing = await GameSessionsRepo.get_active_for_user(session, user_id=user_id)
    if existing is not None:
        return CreateSessionResult(session=_build_session_view(existing, now_utc=now_utc), created=False)

    ladder = await QuestionBank.sample_ladder(session, rng=rng)

    game_session = GameSession(
        id=uuid4(),
        user_id=user_id,
        current_level=0,
        is_failed=False,
        prize=0,
        audience_help_used=False,
        fifty_fifty_used=False,
        friend_call_used=False,
        created_at=now_utc,
        finished_at=None,
        updated_at=now_utc,
        version=0,
    )
    for question in ladder:
        GameQuestion.build(
            game_session=game_session,
            question=question,
            mapping=random_answer_mapping(rng),
        )

    try:
        created = await GameSessionsRepo.create_with_questions(session, game_session=game_session)
    except IntegrityError:
        concurrent = await GameSessionsRepo.get_active_for_user(session, user_id=user_id)
        if concurrent is None:
            raise
        logger.warning(
            "game_session_creation_race",
            user_id=user_id,
            game_session_id=str(concurrent.id),
        )
        return CreateSessionResult(session=_build_session_view(concurrent, now_utc=now_utc), created=False)

    logger.info(
        "game_session_created",
        user_id=user_id,
        game_session_id=str(created.id),
        question_ids=[game_question.question_id for game_question in created.questions],
    )
    return CreateSessionResult(session=_build_session_view(created, now_utc=now_utc), created=True)
