"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
)
from tests.shared.fixtures.factories import TestShiftFactory, TestUserFactory

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "TestShiftFactory",
    "TestUserFactory",
]
