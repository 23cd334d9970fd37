"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from worksync.domain.scheduling.repositories import ShiftRepository
from worksync.domain.user.repositories import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def shift_repository(self) -> ShiftRepository:
        """Get shift repository."""
        ...
