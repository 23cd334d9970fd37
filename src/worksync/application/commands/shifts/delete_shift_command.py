"""Delete a shift."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from worksync.domain.scheduling import ShiftNotFoundError, ShiftRepository

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteShiftCommand:
    """Delete a shift by ID. Manager only; unknown IDs are an error."""

    def __init__(self, shift_repository: ShiftRepository, caller: CallerContext):
        self._shift_repo = shift_repository
        self._caller = caller

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        caller: CallerContext,
    ) -> DeleteShiftCommand:
        return cls(shift_repository=factory.shift_repository(), caller=caller)

    async def execute(self, shift_id: UUID) -> None:
        self._caller.require_manager()

        deleted = await self._shift_repo.delete(shift_id)
        if not deleted:
            raise ShiftNotFoundError(shift_id)

        logger.info("Shift deleted: %s", shift_id)
