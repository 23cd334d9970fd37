"""User domain - manages user identity and roles.

Design notes:
- User ID is a random UUID4 generated at creation (opaque, immutable)
- Username is unique across all users and may be changed later
- Users are never deleted
- Repository interface defined here, implementation in infrastructure
"""

from worksync.domain.user.aggregates import User
from worksync.domain.user.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidRoleError,
    UserNotFoundError,
)
from worksync.domain.user.repositories import UserRepository
from worksync.domain.user.value_objects import UserIdentity, UserRole

__all__ = [
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "InvalidRoleError",
    "User",
    "UserIdentity",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
