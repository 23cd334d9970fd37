"""Scheduling domain exceptions."""

from typing import Union
from uuid import UUID

from worksync.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class ShiftNotFoundError(EntityNotFoundError):
    """Shift not found."""

    def __init__(self, shift_id: Union[UUID, str]) -> None:
        self.shift_id = shift_id
        super().__init__(
            f"Shift not found: {shift_id}",
            code=ErrorCode.SHIFT_NOT_FOUND,
            details={"shift_id": str(shift_id)},
        )


class InvalidDayFormatError(ValidationError):
    """Day is not a valid YYYY-MM-DD (or legacy DD.MM.YYYY) date."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid day: {value!r}. Expected YYYY-MM-DD",
            code=ErrorCode.INVALID_DATE,
            details={"value": value},
        )


class WeekOutOfRangeError(ValidationError):
    """Week offset moves outside the supported calendar (years 1..9999)."""

    def __init__(self, offset_weeks: int) -> None:
        self.offset_weeks = offset_weeks
        super().__init__(
            f"Week offset out of range: {offset_weeks}",
            details={"offset_weeks": offset_weeks},
        )


class InvalidTimeFormatError(ValidationError):
    """Time is not a zero-padded 24-hour HH:MM string."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid time: {value!r}. Expected HH:MM",
            code=ErrorCode.INVALID_FORMAT,
            details={"value": value},
        )


class ShiftOverlapError(ConflictError):
    """The employee already has a shift in that time window."""

    def __init__(self, employee_id: UUID, day: str, conflicting_ids: list[UUID]):
        self.employee_id = employee_id
        self.day = day
        self.conflicting_ids = conflicting_ids
        super().__init__(
            f"Shift overlaps {len(conflicting_ids)} existing shift(s) on {day}",
            code=ErrorCode.SHIFT_OVERLAP,
            details={
                "employee_id": str(employee_id),
                "day": day,
                "conflicting_ids": [str(i) for i in conflicting_ids],
            },
        )
