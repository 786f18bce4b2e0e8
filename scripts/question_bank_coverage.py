from __future__ import annotations

import asyncio

import structlog

from millionaire.core.config import get_settings
from millionaire.core.logging import configure_logging
from millionaire.db.session import SessionLocal
from millionaire.game.questions.bank import QuestionBank

logger = structlog.get_logger("scripts.question_bank_coverage")


async def _run() -> int:
    async with SessionLocal() as session:
        missing = await QuestionBank.missing_levels(session)

    if missing:
        logger.error("question_bank_levels_missing", missing_levels=missing)
        return 1
    logger.info("question_bank_levels_complete")
    return 0


def main() -> int:
    configure_logging(get_settings().log_level)
    return asyncio.run(_run())


if __name__ == "__main__":
    raise SystemExit(main())
