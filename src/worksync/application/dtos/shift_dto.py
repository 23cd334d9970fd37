from dataclasses import dataclass, field
from uuid import UUID

from worksync.domain.scheduling.aggregates import Shift


@dataclass(frozen=True)
class ShiftWriteResult:
    """Outcome of creating or updating a shift.

    ``overlapping_shift_ids`` is only filled under the ``warn`` policy.
    """

    shift: Shift
    overlapping_shift_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True)
class DayMigrationReport:
    """Number of legacy rows rewritten and of unreadable rows dropped."""

    converted: int = 0
    removed: int = 0
