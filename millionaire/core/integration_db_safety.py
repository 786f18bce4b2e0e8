from __future__ import annotations

import re
from dataclasses import dataclass

from sqlalchemy.engine import URL, make_url

TEST_DB_NAME_RE = re.compile(r"(^|_)test(_|$)", re.IGNORECASE)
LOCAL_TEST_HOSTS = frozenset(
    {
        "localhost",
        "127.0.0.1",
        "::1",
        "postgres",
        "millionaire_postgres",
    }
)


@dataclass(frozen=True, slots=True)
class IntegrationDbTarget:
    database_name: str
    host: str
    problem: str | None = None

    @property
    def is_safe(self) -> bool:
        return self.problem is None


def _find_problem(url: URL, *, database_name: str, host: str) -> str | None:
    if url.get_backend_name() != "postgresql":
        return "integration tests run against PostgreSQL only"
    if not database_name:
        return "database name is empty"
    if TEST_DB_NAME_RE.search(database_name) is None:
        return "database name must carry a 'test' segment (e.g. millionaire_test)"
    if host not in LOCAL_TEST_HOSTS:
        return f"host '{host}' is not a local integration-test host"
    return None


def inspect_integration_db(database_url: str) -> IntegrationDbTarget:
    url = make_url(database_url)
    database_name = (url.database or "").strip()
    host = (url.host or "").strip().lower()
    return IntegrationDbTarget(
        database_name=database_name,
        host=host,
        problem=_find_problem(url, database_name=database_name, host=host),
    )


def assert_safe_integration_db(database_url: str) -> None:
    target = inspect_integration_db(database_url)
    if target.is_safe:
        return

    raise RuntimeError(
        "Refusing to wipe game tables on a non-test database: "
        f"{target.problem} (db='{target.database_name}', host='{target.host}')"
    )
