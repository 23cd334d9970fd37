"""Partially update a user account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from worksync.domain.user import (
    DuplicateUsernameError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory
    from worksync_auth import PasswordService

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Apply a patch to an existing user. Manager only."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        caller: CallerContext,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._caller = caller

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordService,
        caller: CallerContext,
    ) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            caller=caller,
        )

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[Union[str, UserRole]] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        self._caller.require_manager()

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if username is not None and username != user.username:
            existing = await self._user_repo.find_by_username(username)
            if existing is not None and existing.id != user.id:
                raise DuplicateUsernameError(username)

        user.apply_patch(
            name=name,
            username=username,
            password=self._password_service.hash(password) if password else password,
            role=role,
            avatar_url=avatar_url,
        )
        await self._user_repo.save(user)

        logger.info("User updated: %s", user.id)
        return user
