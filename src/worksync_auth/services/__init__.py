"""Authentication services.

Provides password storage and JWT token management.
"""

from worksync_auth.services.password_service import PasswordScheme, PasswordService
from worksync_auth.services.token_service import TokenService

__all__ = [
    "PasswordScheme",
    "PasswordService",
    "TokenService",
]
