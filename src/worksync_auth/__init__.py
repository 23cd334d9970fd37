"""WorkSync Auth - authentication infrastructure.

This package is independent of the scheduling domain. It handles:
- Password storage (verbatim or bcrypt)
- JWT access token creation and verification

Architecture:
    worksync_auth/
    ├── services/           # Pure logic (passwords, tokens)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from worksync_auth import PasswordService, TokenService
"""

from worksync_auth.exceptions import AuthError, InvalidTokenError
from worksync_auth.schemas import TokenPayload
from worksync_auth.services import PasswordScheme, PasswordService, TokenService

__all__ = [
    # Services
    "PasswordScheme",
    "PasswordService",
    "TokenService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]
