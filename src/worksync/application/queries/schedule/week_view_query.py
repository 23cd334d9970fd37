"""Week view: seven days of grouped shifts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from worksync.application.dtos import DaySchedule, WeekView
from worksync.domain.scheduling import (
    ShiftRepository,
    day_key,
    day_label,
    group_by_day,
    week_range,
)
from worksync.domain.scheduling.calendar import Locale

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory
    from worksync.domain.shared.time import Clock

logger = logging.getLogger(__name__)


class WeekViewQuery:
    """
    Build the schedule of one Monday..Sunday week.

    Managers get the whole team, or one employee when ``employee_id`` is
    given. Employees always get their own schedule.

    Shifts whose employee no longer exists are left out of the view.
    """

    def __init__(
        self,
        shift_repository: ShiftRepository,
        clock: Clock,
        caller: CallerContext,
        locale: Locale = "en",
    ):
        self._shift_repo = shift_repository
        self._clock = clock
        self._caller = caller
        self._locale = locale

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        clock: Clock,
        caller: CallerContext,
        locale: Locale = "en",
    ) -> WeekViewQuery:
        return cls(
            shift_repository=factory.shift_repository(),
            clock=clock,
            caller=caller,
            locale=locale,
        )

    async def execute(
        self,
        offset_weeks: int = 0,
        employee_id: Optional[UUID] = None,
    ) -> WeekView:
        week = week_range(offset_weeks, today=self._clock.today(), locale=self._locale)
        start_key, end_key = week.range_key

        shifts = await self._shift_repo.find_by_date_range(
            start_key,
            end_key,
            employee_id=self._scope(employee_id),
        )
        grouped = group_by_day(shifts)

        days = [
            DaySchedule(
                date=day,
                day_key=day_key(day),
                label=day_label(day, self._locale),
                shifts=grouped.get(day_key(day), []),
            )
            for day in week.days()
        ]
        logger.debug(
            "Week %s..%s: %d shift(s) for %s",
            start_key,
            end_key,
            sum(len(d.shifts) for d in days),
            self._caller,
        )
        return WeekView(week_range=week, days=days)

    def _scope(self, employee_id: Optional[UUID]) -> Optional[UUID]:
        if self._caller.is_manager:
            return employee_id
        if employee_id is not None:
            self._caller.require_view(employee_id)
        return self._caller.user_id
