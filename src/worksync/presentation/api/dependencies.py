"""FastAPI dependency injection for the WorkSync API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Caller context for shift reads and writes
- Service instances
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from worksync.application.context import CallerContext
from worksync.application.services import AuthenticationService, authorize
from worksync.domain.shared.exceptions import ForbiddenError
from worksync.domain.shared.time import Clock, SystemClock
from worksync.domain.user import User, UserRole
from worksync.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from worksync.presentation.api.config import get_api_settings
from worksync_auth import (
    InvalidTokenError,
    PasswordScheme,
    PasswordService,
    TokenService,
)
from worksync_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]
BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None,
    Depends(security),
]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the session maker the
    app was built with (shared engine and pool).

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Repositories sharing the request's session."""
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_token_service(settings: SettingsDep) -> TokenService:
    """Get JWT service configured with API settings."""
    return TokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordService:
    """Get password service for the configured storage scheme."""
    return PasswordService(scheme=PasswordScheme(settings.password_hashing))


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
PasswordServiceDep = Annotated[PasswordService, Depends(get_password_service)]


async def get_authentication_service(
    factory: RepoFactory,
    token_service: TokenServiceDep,
    password_service: PasswordServiceDep,
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        user_repository=factory.user_repository(),
        password_service=password_service,
        token_service=token_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


def get_clock(settings: SettingsDep) -> Clock:
    """Clock defining "today" for week views."""
    return SystemClock(settings.schedule_timezone)


ClockDep = Annotated[Clock, Depends(get_clock)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: BearerCredentials,
    factory: RepoFactory,
    token_service: TokenServiceDep,
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = token_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    if not payload.is_access_token():
        raise _unauthorized("Invalid token type")

    user = await factory.user_repository().find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise _unauthorized("User not found")

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_current_user_optional(
    credentials: BearerCredentials,
    factory: RepoFactory,
    token_service: TokenServiceDep,
) -> User | None:
    """
    Optional authentication dependency.

    Returns None when no token is sent at all. A token that is sent but
    invalid still fails with 401.
    """
    if credentials is None:
        return None
    return await get_current_user(credentials, factory, token_service)


OptionalCurrentUser = Annotated[User | None, Depends(get_current_user_optional)]


async def get_caller_context(user: CurrentUser) -> CallerContext:
    """Caller context passed to every shift command and query."""
    return CallerContext.create(user)


Caller = Annotated[CallerContext, Depends(get_caller_context)]


async def require_manager(user: CurrentUser) -> CallerContext:
    """Require a manager caller."""
    if not authorize(user, UserRole.MANAGER):
        logger.warning("Manager-only endpoint refused for %s", user.username)
        raise ForbiddenError
    return CallerContext.create(user)


ManagerCaller = Annotated[CallerContext, Depends(require_manager)]