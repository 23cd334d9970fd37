"""Scheduling domain: shifts, week windows and schedule views."""

from worksync.domain.scheduling.aggregates import Shift
from worksync.domain.scheduling.calendar import (
    WeekRange,
    day_key,
    day_label,
    is_canonical_day,
    normalize_day,
    parse_day,
    validate_time,
    week_range,
)
from worksync.domain.scheduling.exceptions import (
    InvalidDayFormatError,
    InvalidTimeFormatError,
    ShiftNotFoundError,
    ShiftOverlapError,
    WeekOutOfRangeError,
)
from worksync.domain.scheduling.repositories import ShiftRepository
from worksync.domain.scheduling.services import (
    find_overlapping,
    group_by_day,
    sort_flat,
)
from worksync.domain.scheduling.value_objects import (
    UNKNOWN_MEMBER,
    OverlapPolicy,
    ScheduledShift,
)

__all__ = [
    "UNKNOWN_MEMBER",
    "InvalidDayFormatError",
    "InvalidTimeFormatError",
    "OverlapPolicy",
    "ScheduledShift",
    "Shift",
    "ShiftNotFoundError",
    "ShiftOverlapError",
    "ShiftRepository",
    "WeekOutOfRangeError",
    "WeekRange",
    "day_key",
    "day_label",
    "find_overlapping",
    "group_by_day",
    "is_canonical_day",
    "normalize_day",
    "parse_day",
    "sort_flat",
    "validate_time",
    "week_range",
]
