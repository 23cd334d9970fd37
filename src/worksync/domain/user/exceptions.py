"""User domain exceptions."""

from typing import Union
from uuid import UUID

from worksync.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class DuplicateUsernameError(ConflictError):
    """Username already taken by another user."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            f"Username already exists: {username}",
            code=ErrorCode.DUPLICATE_USERNAME,
            details={"username": username},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: Union[UUID, str]) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password.

    The message never says which of the two was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials", code=ErrorCode.INVALID_CREDENTIALS)


class InvalidRoleError(ValidationError):
    """Role is neither manager nor employee."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(
            f"Invalid role: {role}. Must be 'manager' or 'employee'",
            code=ErrorCode.INVALID_ROLE,
            details={"role": role},
        )
