"""Rewrite shifts stored with a legacy day format."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worksync.application.dtos import DayMigrationReport
from worksync.domain.scheduling import (
    InvalidDayFormatError,
    ShiftRepository,
    normalize_day,
)

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class MigrateDayFormatsCommand:
    """
    Bring every stored day into canonical ``YYYY-MM-DD`` form.

    ``DD.MM.YYYY`` rows are converted in place. Rows whose day cannot be
    read as a date at all are deleted, since range queries could never
    return them. Manager only.
    """

    def __init__(self, shift_repository: ShiftRepository, caller: CallerContext):
        self._shift_repo = shift_repository
        self._caller = caller

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        caller: CallerContext,
    ) -> MigrateDayFormatsCommand:
        return cls(shift_repository=factory.shift_repository(), caller=caller)

    async def execute(self) -> DayMigrationReport:
        self._caller.require_manager()

        converted = 0
        removed = 0
        for shift in await self._shift_repo.find_non_canonical():
            try:
                canonical = normalize_day(shift.day)
            except InvalidDayFormatError:
                logger.warning(
                    "Removing shift %s with unreadable day %r",
                    shift.id,
                    shift.day,
                )
                await self._shift_repo.delete(shift.id)
                removed += 1
                continue

            logger.debug("Shift %s: %s -> %s", shift.id, shift.day, canonical)
            shift.apply_patch(day=canonical)
            await self._shift_repo.save(shift)
            converted += 1

        logger.info(
            "Day format migration done: %d converted, %d removed",
            converted,
            removed,
        )
        return DayMigrationReport(converted=converted, removed=removed)
