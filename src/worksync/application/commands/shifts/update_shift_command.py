"""Partially update a shift."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from worksync.application.dtos import ShiftWriteResult
from worksync.application.services import ShiftOverlapGuard
from worksync.domain.scheduling import (
    OverlapPolicy,
    ShiftNotFoundError,
    ShiftRepository,
)

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateShiftCommand:
    """Apply a patch to an existing shift. Manager only."""

    def __init__(
        self,
        shift_repository: ShiftRepository,
        caller: CallerContext,
        overlap_policy: Union[str, OverlapPolicy] = OverlapPolicy.ALLOW,
    ):
        self._shift_repo = shift_repository
        self._caller = caller
        self._overlap_guard = ShiftOverlapGuard(shift_repository, overlap_policy)

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        caller: CallerContext,
        overlap_policy: Union[str, OverlapPolicy] = OverlapPolicy.ALLOW,
    ) -> UpdateShiftCommand:
        return cls(
            shift_repository=factory.shift_repository(),
            caller=caller,
            overlap_policy=overlap_policy,
        )

    async def execute(  # NOQA: PLR0913
        self,
        shift_id: UUID,
        employee_id: Optional[UUID] = None,
        day: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        task: Optional[str] = None,
    ) -> ShiftWriteResult:
        self._caller.require_manager()

        shift = await self._shift_repo.find_by_id(shift_id)
        if shift is None:
            raise ShiftNotFoundError(shift_id)

        shift.apply_patch(
            employee_id=employee_id,
            day=day,
            start_time=start_time,
            end_time=end_time,
            task=task,
        )
        overlapping = await self._overlap_guard.check(shift)
        await self._shift_repo.save(shift)

        logger.info("Shift updated: %s", shift.id)
        return ShiftWriteResult(shift=shift, overlapping_shift_ids=overlapping)
