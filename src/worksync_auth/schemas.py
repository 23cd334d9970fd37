"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    username
        The user's login name at the time the token was issued
    role
        The user's role at the time the token was issued
    exp
        Token expiration timestamp
    token_type
        Always "access" for tokens issued by this service
    """

    user_id: UUID
    username: str
    role: str
    exp: datetime
    token_type: str = "access"

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"
