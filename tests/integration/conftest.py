from __future__ import annotations

import pytest
from sqlalchemy import text

from millionaire.core.config import get_settings
from millionaire.core.integration_db_safety import assert_safe_integration_db
from millionaire.core.logging import configure_logging
from millionaire.db.models import GameQuestion, GameSession, LedgerEntry, Question, User  # noqa: F401
from millionaire.db.models.base import Base
from millionaire.db.session import engine

TRUNCATE_TABLES = (
    "ledger_entries",
    "game_questions",
    "game_sessions",
    "questions",
    "users",
)

TRUNCATE_SQL = f"TRUNCATE TABLE {', '.join(TRUNCATE_TABLES)} RESTART IDENTITY CASCADE"


@pytest.fixture(scope="session", autouse=True)
def structured_logging() -> None:
    configure_logging(get_settings().log_level)


@pytest.fixture(autouse=True)
async def cleanup_db() -> None:
    # Dispose pooled connections between tests to avoid cross-event-loop asyncpg reuse.
    await engine.dispose()

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as exc:  # pragma: no cover - environment-dependent
        pytest.skip(f"Postgres is required for integration tests: {exc}")

    assert_safe_integration_db(engine.url.render_as_string(hide_password=False))

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(text(TRUNCATE_SQL))

    yield

    await engine.dispose()
