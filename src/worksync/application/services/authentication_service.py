"""Authentication service for login and token checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from worksync.domain.user import (
    InvalidCredentialsError,
    User,
    UserIdentity,
    UserNotFoundError,
    UserRole,
)
from worksync_auth import InvalidTokenError

if TYPE_CHECKING:
    from worksync.domain.user import UserRepository
    from worksync_auth import PasswordService, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Identity of the logged-in user plus a signed access token."""

    identity: UserIdentity
    token: str
    expires_in: int


def authorize(
    user: Union[User, UserIdentity],
    required_role: Union[str, UserRole],
) -> bool:
    """True if the user holds exactly the required role."""
    return user.role == UserRole(required_role)


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the generic worksync_auth services (password checks, JWT
    tokens) and the User domain:
    - Username/password authentication
    - Login returning an identity and an access token
    - Resolving the current user from a token
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        token_service: TokenService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._token_service = token_service

    async def authenticate(self, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Unknown usernames and wrong passwords fail the same way so callers
        cannot probe for existing accounts.

        Raises
        ------
        InvalidCredentialsError
            If the user does not exist or the password does not match
        """
        user = await self._user_repo.find_by_username(username)
        if user is None:
            logger.warning("Login rejected: unknown username %r", username)
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password):
            logger.warning("Login rejected: wrong password for %r", username)
            raise InvalidCredentialsError

        return user

    async def login(self, username: str, password: str) -> LoginResult:
        user = await self.authenticate(username, password)
        token = self._token_service.create_access_token(
            user_id=user.id,
            username=user.username,
            role=user.role.value,
        )
        logger.info("User logged in: %s (role: %s)", user.username, user.role.value)
        return LoginResult(
            identity=user.identity(),
            token=token,
            expires_in=self._token_service.expires_in_seconds,
        )

    async def current_user(self, token: str) -> User:
        """
        Resolve the user a token was issued to.

        Raises
        ------
        InvalidTokenError
            If the token is expired, malformed or not an access token
        UserNotFoundError
            If the user no longer exists
        """
        payload = self._token_service.verify_token(token)
        if not payload.is_access_token():
            msg = "Not an access token"
            raise InvalidTokenError(msg)
        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            raise UserNotFoundError(payload.user_id)
        return user

    @staticmethod
    def authorize(
        user: Union[User, UserIdentity],
        required_role: Union[str, UserRole],
    ) -> bool:
        return authorize(user, required_role)
