"""The caller's own shifts across all weeks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from worksync.application.dtos import DaySchedule
from worksync.domain.scheduling import (
    ShiftRepository,
    day_label,
    group_by_day,
    is_canonical_day,
    parse_day,
)
from worksync.domain.scheduling.calendar import Locale

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory


class MyScheduleQuery:
    """Every shift of the caller, grouped by day in ascending order."""

    def __init__(
        self,
        shift_repository: ShiftRepository,
        caller: CallerContext,
        locale: Locale = "en",
    ):
        self._shift_repo = shift_repository
        self._caller = caller
        self._locale = locale

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        caller: CallerContext,
        locale: Locale = "en",
    ) -> MyScheduleQuery:
        return cls(
            shift_repository=factory.shift_repository(),
            caller=caller,
            locale=locale,
        )

    async def execute(self) -> list[DaySchedule]:
        shifts = await self._shift_repo.find_with_filters(
            employee_id=self._caller.user_id,
        )
        grouped = group_by_day(s for s in shifts if is_canonical_day(s.day))

        schedule = []
        for key in sorted(grouped):
            day = parse_day(key)
            schedule.append(
                DaySchedule(
                    date=day,
                    day_key=key,
                    label=day_label(day, self._locale),
                    shifts=grouped[key],
                ),
            )
        return schedule
