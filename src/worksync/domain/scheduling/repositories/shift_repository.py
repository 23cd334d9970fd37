"""Shift repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from worksync.domain.scheduling.aggregates import Shift
from worksync.domain.scheduling.value_objects import ScheduledShift


class ShiftRepository(ABC):
    """Repository interface for Shift aggregates.

    Results come back in storage (insertion) order unless a method says
    otherwise. Day arguments are canonical ``YYYY-MM-DD`` keys.
    """

    @abstractmethod
    async def find_by_id(self, shift_id: UUID) -> Optional[Shift]:
        """Find a shift by ID, or None."""

    @abstractmethod
    async def find_by_employee(self, employee_id: UUID) -> list[Shift]:
        """All shifts of one employee."""

    @abstractmethod
    async def find_by_day(self, day: str) -> list[Shift]:
        """All shifts whose day equals ``day`` exactly."""

    @abstractmethod
    async def find_by_date_range(
        self,
        start_day: str,
        end_day: str,
        employee_id: Optional[UUID] = None,
    ) -> list[ScheduledShift]:
        """
        Shifts with ``start_day <= day <= end_day``, joined with employee names.

        Rows whose day is not in canonical form are never returned.

        Parameters
        ----------
        start_day
            Inclusive lower bound
        end_day
            Inclusive upper bound
        employee_id
            Restrict to one employee
        """

    @abstractmethod
    async def find_with_filters(
        self,
        start_day: Optional[str] = None,
        end_day: Optional[str] = None,
        employee_id: Optional[UUID] = None,
    ) -> list[ScheduledShift]:
        """
        Shifts matching all given filters, joined with employee names.

        Open bounds are allowed. Whenever a bound is given, non-canonical
        rows are excluded.
        """

    @abstractmethod
    async def find_all(self) -> list[Shift]:
        """All shifts in insertion order."""

    @abstractmethod
    async def find_non_canonical(self) -> list[Shift]:
        """Shifts whose stored day is not a canonical ``YYYY-MM-DD`` key."""

    @abstractmethod
    async def save(self, shift: Shift) -> None:
        """Create or update a shift."""

    @abstractmethod
    async def delete(self, shift_id: UUID) -> bool:
        """
        Delete a shift.

        Returns
        -------
        True if a shift was deleted, False if the ID was unknown
        """
