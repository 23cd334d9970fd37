"""Caller context for request-scoped identity and role."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from worksync.domain.shared.exceptions import ForbiddenError
from worksync.domain.user.value_objects import UserRole

if TYPE_CHECKING:
    from worksync.domain.user import User

SYSTEM_USER_ID = UUID(int=0)


@dataclass(frozen=True)
class CallerContext:
    """
    Immutable context for the caller of a command or query.

    Created once per request from the authenticated user and passed
    explicitly to every use case that reads or writes shifts. Use cases
    decide what the caller may see and do from ``role``.
    """

    user_id: UUID
    username: str
    role: UserRole

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.MANAGER

    def require_manager(self) -> None:
        if not self.is_manager:
            raise ForbiddenError(details={"user_id": str(self.user_id)})

    def can_view(self, employee_id: UUID) -> bool:
        return self.is_manager or employee_id == self.user_id

    def require_view(self, employee_id: UUID) -> None:
        if not self.can_view(employee_id):
            msg = "Employees can only view their own shifts"
            raise ForbiddenError(msg, details={"employee_id": str(employee_id)})

    @classmethod
    def create(cls, user: User) -> CallerContext:
        return cls(user_id=user.id, username=user.username, role=user.role)

    @classmethod
    def system(cls) -> CallerContext:
        """Context for maintenance tasks run outside any request (CLI, seeding)."""
        return cls(user_id=SYSTEM_USER_ID, username="system", role=UserRole.MANAGER)

    def __str__(self) -> str:
        return f"CallerContext({self.username})"

    def __repr__(self) -> str:
        return (
            f"CallerContext(user_id={self.user_id}, "
            f"username={self.username!r}, role={self.role.value})"
        )
