"""Shared domain components.

This module exports shared exceptions and time utilities used across
domain boundaries.
"""

from worksync.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)
from worksync.domain.shared.time import Clock, FixedClock, SystemClock, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ForbiddenError",
    # Utilities
    "Clock",
    "FixedClock",
    "SystemClock",
    "utc_now",
]
