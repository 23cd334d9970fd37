"""A shift joined with the display name of its employee."""

from dataclasses import dataclass

from worksync.domain.scheduling.aggregates import Shift

UNKNOWN_MEMBER = "Unknown Member"


@dataclass(frozen=True)
class ScheduledShift:
    """Read-side view of a shift.

    ``employee_found`` is False when the shift points at a user that does
    not exist; ``employee_name`` then holds the placeholder name.
    """

    shift: Shift
    employee_name: str = UNKNOWN_MEMBER
    employee_found: bool = False

    @property
    def day(self) -> str:
        return self.shift.day

    @property
    def start_time(self) -> str:
        return self.shift.start_time
