from __future__ import annotations

import asyncio
import re

import asyncpg
import structlog
from sqlalchemy.engine import make_url

from millionaire.core.config import get_settings
from millionaire.core.integration_db_safety import inspect_integration_db
from millionaire.core.logging import configure_logging

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

logger = structlog.get_logger("scripts.ensure_test_db")


async def _ensure_database_exists(database_url: str) -> None:
    target = inspect_integration_db(database_url)
    if not target.is_safe:
        raise RuntimeError(f"Refusing to create database: {target.problem}")
    if IDENTIFIER_RE.fullmatch(target.database_name) is None:
        raise RuntimeError(f"Unsupported database name '{target.database_name}'.")

    url = make_url(database_url)
    if url.username is None:
        raise RuntimeError("DATABASE_URL username is required.")

    conn = await asyncpg.connect(
        host=url.host or "localhost",
        port=int(url.port or 5432),
        user=url.username,
        password=url.password,
        database="postgres",
    )
    try:
        exists = await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", target.database_name)
        if exists:
            logger.info("test_database_exists", database=target.database_name, host=target.host)
            return
        await conn.execute(f'CREATE DATABASE "{target.database_name}"')
        logger.info("test_database_created", database=target.database_name, host=target.host)
    finally:
        await conn.close()


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(_ensure_database_exists(settings.database_url))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
