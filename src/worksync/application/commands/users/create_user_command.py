"""Create a user account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from worksync.domain.shared.exceptions import AuthenticationError, ValidationError
from worksync.domain.user import DuplicateUsernameError, User, UserRepository, UserRole

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory
    from worksync_auth import PasswordService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """
    Command to create a new user.

    Only managers may create users. The single exception is bootstrapping:
    while no user exists at all, a call without a caller is accepted so the
    first account can be created.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        caller: Optional[CallerContext] = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._caller = caller

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordService,
        caller: Optional[CallerContext] = None,
    ) -> CreateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            caller=caller,
        )

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        username: str,
        password: str,
        role: Union[str, UserRole] = UserRole.EMPLOYEE,
        avatar_url: Optional[str] = None,
    ) -> User:
        await self._check_caller()

        if not password:
            msg = "Field 'password' is required"
            raise ValidationError(msg, details={"field": "password"})

        if username and await self._user_repo.exists_by_username(username):
            raise DuplicateUsernameError(username)

        user = User.create(
            name=name,
            username=username,
            password=self._password_service.hash(password),
            role=role,
            avatar_url=avatar_url,
        )
        await self._user_repo.save(user)

        logger.info("User created: %s (role: %s)", user.username, user.role.value)
        return user

    async def _check_caller(self) -> None:
        if self._caller is not None:
            self._caller.require_manager()
            return

        if await self._user_repo.count() > 0:
            msg = "Authentication required"
            raise AuthenticationError(msg)
        logger.info("No users yet, accepting bootstrap account creation")
