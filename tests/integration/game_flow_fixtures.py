from __future__ import annotations

from datetime import datetime, timezone

from millionaire.db.repo.users_repo import UsersRepo
from millionaire.db.session import SessionLocal
from millionaire.game.prizes import QUESTION_LEVELS
from millionaire.game.questions.bank import QuestionBank

UTC = timezone.utc


async def _create_player(name: str, *, now_utc: datetime) -> int:
    async with SessionLocal.begin() as session:
        user = await UsersRepo.create(session, name=name, now_utc=now_utc)
        return user.id


async def _seed_bank(*, now_utc: datetime, per_level: int = 2, skip_levels: tuple[int, ...] = ()) -> None:
    async with SessionLocal.begin() as session:
        for level in QUESTION_LEVELS:
            if level in skip_levels:
                continue
            for index in range(per_level):
                await QuestionBank.add_question(
                    session,
                    text=f"Level {level} question #{index}?",
                    answers=(
                        f"correct {level}.{index}",
                        f"wrong {level}.{index}.1",
                        f"wrong {level}.{index}.2",
                        f"wrong {level}.{index}.3",
                    ),
                    level=level,
                    now_utc=now_utc,
                )
