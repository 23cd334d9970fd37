"""List and look up users."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from worksync.domain.user import (
    InvalidRoleError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)

if TYPE_CHECKING:
    from worksync.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ListUsersQuery:
    """Query returning users in insertion order, optionally by role."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, role: Optional[Union[str, UserRole]] = None) -> list[User]:
        role_filter = self._parse_role(role) if role is not None else None
        users = await self._user_repo.list_all(role=role_filter)
        logger.debug("Listed %d users (role=%s)", len(users), role_filter)
        return users

    async def get(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _parse_role(role: Union[str, UserRole]) -> UserRole:
        try:
            return UserRole(role)
        except ValueError as e:
            raise InvalidRoleError(str(role)) from e
