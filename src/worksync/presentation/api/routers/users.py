"""Users router: listing, lookup and account management."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from worksync.application.commands import CreateUserCommand, UpdateUserCommand
from worksync.application.context import CallerContext
from worksync.application.queries import ListUsersQuery
from worksync.presentation.api.dependencies import (
    CurrentUser,
    ManagerCaller,
    OptionalCurrentUser,
    PasswordServiceDep,
    RepoFactory,
)
from worksync.presentation.api.schemas.common import ErrorResponse
from worksync.presentation.api.schemas.users import (
    UserCreatedResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

RoleFilter = Annotated[
    Optional[str],
    Query(description="Only users with this role: 'manager' or 'employee'"),
]


@router.get("", summary="List users")
async def list_users(
    _: CurrentUser,
    factory: RepoFactory,
    role: RoleFilter = None,
) -> list[UserResponse]:
    """All users in creation order, optionally filtered by role."""
    users = await ListUsersQuery.from_factory(factory).execute(role=role)
    return [UserResponse.from_domain(u) for u in users]


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(
    user_id: UUID,
    _: CurrentUser,
    factory: RepoFactory,
) -> UserResponse:
    user = await ListUsersQuery.from_factory(factory).get(user_id)
    return UserResponse.from_domain(user)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        400: {
            "model": ErrorResponse,
            "description": "Missing field, invalid role or username taken",
        },
        401: {"model": ErrorResponse, "description": "Authentication required"},
        403: {"model": ErrorResponse, "description": "Manager role required"},
    },
)
async def create_user(
    request: UserCreateRequest,
    current_user: OptionalCurrentUser,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
) -> UserCreatedResponse:
    """
    Create a user account.

    Requires a manager token, except while the system has no users at all:
    then the first account can be created without authentication.
    """
    caller = CallerContext.create(current_user) if current_user else None
    command = CreateUserCommand.from_factory(factory, password_service, caller)

    try:
        user = await command.execute(
            name=request.name,
            username=request.username,
            password=request.password,
            role=request.role,
            avatar_url=request.avatar_url,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return UserCreatedResponse(id=user.id)


@router.patch(
    "/{user_id}",
    summary="Update a user",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid field or username taken"},
        403: {"model": ErrorResponse, "description": "Manager role required"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    caller: ManagerCaller,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
) -> UserResponse:
    command = UpdateUserCommand.from_factory(factory, password_service, caller)

    try:
        user = await command.execute(
            user_id=user_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_domain(user)
