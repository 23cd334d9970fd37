from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from worksync.domain.scheduling.calendar import normalize_day, validate_time
from worksync.domain.shared.exceptions import ValidationError
from worksync.domain.shared.time import utc_now


def _require(field: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        msg = f"Field '{field}' is required"
        raise ValidationError(msg, details={"field": field})
    return value


class Shift:
    """
    Shift aggregate root.

    A scheduled work assignment: one employee, one day, a start and end
    time and a task label. ``day`` is always stored in canonical
    ``YYYY-MM-DD`` form once it passes through ``create`` or ``apply_patch``.

    The employee reference is not checked against existing users, and
    ``start_time < end_time`` is not enforced.
    """

    def __init__(  # NOQA: PLR0913
        self,
        employee_id: UUID,
        day: str,
        start_time: str,
        end_time: str,
        task: str,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._employee_id = employee_id
        self._day = day
        self._start_time = start_time
        self._end_time = end_time
        self._task = task
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def employee_id(self) -> UUID:
        return self._employee_id

    @property
    def day(self) -> str:
        return self._day

    @property
    def start_time(self) -> str:
        return self._start_time

    @property
    def end_time(self) -> str:
        return self._end_time

    @property
    def task(self) -> str:
        return self._task

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def overlaps(self, other: "Shift") -> bool:
        """True if both shifts put the same employee to work at the same time.

        Times are compared as ``HH:MM`` strings, which order correctly
        because they are zero-padded.
        """
        if other.id == self._id:
            return False
        if other.employee_id != self._employee_id or other.day != self._day:
            return False
        return self._start_time < other.end_time and other.start_time < self._end_time

    def apply_patch(  # NOQA: PLR0913
        self,
        employee_id: Optional[UUID] = None,
        day: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        task: Optional[str] = None,
    ) -> None:
        # Only provided (non-None) values are updated; others are preserved.
        if employee_id is not None:
            self._employee_id = employee_id
        if day is not None:
            self._day = normalize_day(day)
        if start_time is not None:
            self._start_time = validate_time(start_time)
        if end_time is not None:
            self._end_time = validate_time(end_time)
        if task is not None:
            self._task = _require("task", task)
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        employee_id: UUID,
        day: str,
        start_time: str,
        end_time: str,
        task: str,
    ) -> "Shift":
        if employee_id is None:
            msg = "Field 'employee_id' is required"
            raise ValidationError(msg, details={"field": "employee_id"})
        return cls(
            employee_id=employee_id,
            day=normalize_day(_require("day", day)),
            start_time=validate_time(_require("start_time", start_time)),
            end_time=validate_time(_require("end_time", end_time)),
            task=_require("task", task),
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        employee_id: UUID,
        day: str,
        start_time: str,
        end_time: str,
        task: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Shift":
        # Stored rows are taken as-is, including legacy day formats
        return cls(
            id=id,
            employee_id=employee_id,
            day=day,
            start_time=start_time,
            end_time=end_time,
            task=task,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shift):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Shift(id={self._id}, employee_id={self._employee_id}, "
            f"day={self._day}, {self._start_time}-{self._end_time})"
        )
