"""Authentication schemas for request/response models."""

from pydantic import ConfigDict, Field

from worksync.presentation.api.schemas.common import CamelModel
from worksync.presentation.api.schemas.users import UserResponse


class LoginRequest(CamelModel):
    """Request schema for user login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "manager", "password": "manager123"},
        },
    )


class LoginResponse(CamelModel):
    """Access token plus the identity of the logged-in user."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse


class MeResponse(CamelModel):
    """The user a token belongs to."""

    user: UserResponse
