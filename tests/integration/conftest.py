"""Integration test configuration and fixtures.

Persistence tests run against in-memory SQLite by default; the PostgreSQL
variants are marked ``integration`` and need ``--run-integration``.
"""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
)
