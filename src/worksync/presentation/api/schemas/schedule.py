"""Schedule view schemas."""

from __future__ import annotations

import datetime as dt

from worksync.application.dtos import DaySchedule, WeekView
from worksync.domain.scheduling import WeekRange
from worksync.presentation.api.schemas.common import CamelModel
from worksync.presentation.api.schemas.shifts import ShiftResponse


class WeekRangeResponse(CamelModel):
    start: dt.date
    end: dt.date
    start_label: str
    end_label: str
    range_key: tuple[str, str]

    @classmethod
    def from_domain(cls, week: WeekRange) -> WeekRangeResponse:
        return cls(
            start=week.start,
            end=week.end,
            start_label=week.start_label,
            end_label=week.end_label,
            range_key=week.range_key,
        )


class DayScheduleResponse(CamelModel):
    date: dt.date
    day_key: str
    label: str
    shifts: list[ShiftResponse]

    @classmethod
    def from_dto(cls, day: DaySchedule) -> DayScheduleResponse:
        return cls(
            date=day.date,
            day_key=day.day_key,
            label=day.label,
            shifts=[ShiftResponse.from_scheduled(s) for s in day.shifts],
        )


class WeekViewResponse(CamelModel):
    """Seven days Monday..Sunday plus the days that have shifts."""

    week_range: WeekRangeResponse
    days: list[DayScheduleResponse]
    days_with_shifts: list[DayScheduleResponse]

    @classmethod
    def from_dto(cls, view: WeekView) -> WeekViewResponse:
        return cls(
            week_range=WeekRangeResponse.from_domain(view.week_range),
            days=[DayScheduleResponse.from_dto(d) for d in view.days],
            days_with_shifts=[
                DayScheduleResponse.from_dto(d) for d in view.days_with_shifts
            ],
        )
