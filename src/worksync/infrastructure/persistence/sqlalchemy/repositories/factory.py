"""SQLAlchemy repository factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from worksync.infrastructure.persistence.sqlalchemy.repositories.scheduling import (
    ShiftRepositorySQLAlchemy,
)
from worksync.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share one session, so a command's writes land in
    a single transaction that the caller commits.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._shift_repo: ShiftRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def shift_repository(self) -> ShiftRepositorySQLAlchemy:
        if self._shift_repo is None:
            self._shift_repo = ShiftRepositorySQLAlchemy(self._session)
        return self._shift_repo
