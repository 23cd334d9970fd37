"""Password-free projection of a user."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from worksync.domain.user.value_objects.user_role import UserRole


@dataclass(frozen=True)
class UserIdentity:
    """What the rest of the system is allowed to know about a user."""

    id: UUID
    name: str
    username: str
    role: UserRole
    avatar_url: Optional[str] = None
