"""Read models for schedule views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from worksync.domain.scheduling.calendar import WeekRange
from worksync.domain.scheduling.value_objects import ScheduledShift


@dataclass(frozen=True)
class DaySchedule:
    """Shifts of a single day, ordered by start time."""

    date: date
    day_key: str
    label: str
    shifts: list[ScheduledShift] = field(default_factory=list)

    @property
    def has_shifts(self) -> bool:
        return bool(self.shifts)


@dataclass(frozen=True)
class WeekView:
    """Seven Monday..Sunday day entries and the subset that has shifts."""

    week_range: WeekRange
    days: list[DaySchedule]

    @property
    def days_with_shifts(self) -> list[DaySchedule]:
        return [day for day in self.days if day.has_shifts]
