"""User schemas. Passwords never appear in responses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from pydantic import ConfigDict, Field

from worksync.presentation.api.schemas.common import CamelModel

if TYPE_CHECKING:
    from worksync.domain.user import User, UserIdentity


class UserResponse(CamelModel):
    """Public projection of a user."""

    id: UUID
    name: str
    username: str
    role: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_domain(cls, user: Union[User, UserIdentity]) -> UserResponse:
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            role=user.role.value,
            avatar_url=user.avatar_url,
        )


class UserCreateRequest(CamelModel):
    """Request schema for creating a user."""

    name: str
    username: str
    password: str
    role: str = Field(default="employee", description="'manager' or 'employee'")
    avatar_url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Olga Smirnova",
                "username": "olga",
                "password": "olga123",
                "role": "employee",
            },
        },
    )


class UserCreatedResponse(CamelModel):
    id: UUID


class UserUpdateRequest(CamelModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None
