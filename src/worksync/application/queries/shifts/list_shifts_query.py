"""Shift lookups scoped to the caller."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from worksync.domain.scheduling import (
    UNKNOWN_MEMBER,
    ScheduledShift,
    Shift,
    ShiftNotFoundError,
    ShiftRepository,
    normalize_day,
    sort_flat,
)
from worksync.domain.user import UserRepository

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ListShiftsQuery:
    """
    Read shifts on behalf of a caller.

    Managers see every shift. Employees only ever see their own; asking
    for someone else's shifts raises ``ForbiddenError``.

    Day arguments accept the canonical form and the legacy ``DD.MM.YYYY``
    form; both are normalized before they reach the repository.
    """

    def __init__(
        self,
        shift_repository: ShiftRepository,
        user_repository: UserRepository,
        caller: CallerContext,
    ):
        self._shift_repo = shift_repository
        self._user_repo = user_repository
        self._caller = caller

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        caller: CallerContext,
    ) -> ListShiftsQuery:
        return cls(
            shift_repository=factory.shift_repository(),
            user_repository=factory.user_repository(),
            caller=caller,
        )

    async def by_employee(self, employee_id: UUID) -> list[Shift]:
        self._caller.require_view(employee_id)
        return await self._shift_repo.find_by_employee(employee_id)

    async def by_day(self, day: str) -> list[Shift]:
        shifts = await self._shift_repo.find_by_day(normalize_day(day))
        return [s for s in shifts if self._caller.can_view(s.employee_id)]

    async def by_date_range(self, start_day: str, end_day: str) -> list[ScheduledShift]:
        return await self._shift_repo.find_by_date_range(
            normalize_day(start_day),
            normalize_day(end_day),
            employee_id=self._scope(None),
        )

    async def search(
        self,
        start_day: Optional[str] = None,
        end_day: Optional[str] = None,
        employee_id: Optional[UUID] = None,
    ) -> list[ScheduledShift]:
        """Filtered flat list ordered by day, then start time."""
        shifts = await self._shift_repo.find_with_filters(
            start_day=normalize_day(start_day) if start_day else None,
            end_day=normalize_day(end_day) if end_day else None,
            employee_id=self._scope(employee_id),
        )
        logger.debug("Shift search returned %d rows", len(shifts))
        return sort_flat(shifts)

    async def get(self, shift_id: UUID) -> ScheduledShift:
        shift = await self._shift_repo.find_by_id(shift_id)
        if shift is None:
            raise ShiftNotFoundError(shift_id)
        self._caller.require_view(shift.employee_id)
        return await self.scheduled(shift)

    async def scheduled(self, shift: Shift) -> ScheduledShift:
        """Attach the employee name to a single shift."""
        employee = await self._user_repo.find_by_id(shift.employee_id)
        if employee is None:
            return ScheduledShift(shift=shift, employee_name=UNKNOWN_MEMBER)
        return ScheduledShift(
            shift=shift,
            employee_name=employee.name,
            employee_found=True,
        )

    def _scope(self, employee_id: Optional[UUID]) -> Optional[UUID]:
        if self._caller.is_manager:
            return employee_id
        if employee_id is not None:
            self._caller.require_view(employee_id)
        return self._caller.user_id
