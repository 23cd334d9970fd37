"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from worksync.domain.user.aggregates.user import User
from worksync.domain.user.value_objects import UserRole


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by their username (exact match).

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if a user exists with the given username."""

    @abstractmethod
    async def list_all(self, role: Optional[UserRole] = None) -> list[User]:
        """
        List users in insertion order.

        Parameters
        ----------
        role
            Only return users with this role (all users if omitted)
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of users."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        If the user exists (by ID), updates it.
        If the user doesn't exist, creates it.

        Raises
        ------
        DuplicateUsernameError
            If the username is already in use by another user
        """
