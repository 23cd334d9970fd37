"""Application layer services."""

from worksync.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
    authorize,
)
from worksync.application.services.shift_overlap_guard import ShiftOverlapGuard

__all__ = [
    "AuthenticationService",
    "LoginResult",
    "ShiftOverlapGuard",
    "authorize",
]
