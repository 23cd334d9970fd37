"""Create a shift."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from worksync.application.dtos import ShiftWriteResult
from worksync.application.services import ShiftOverlapGuard
from worksync.domain.scheduling import OverlapPolicy, Shift, ShiftRepository

if TYPE_CHECKING:
    from worksync.application.context import CallerContext
    from worksync.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateShiftCommand:
    """
    Command to schedule a new shift. Manager only.

    The employee reference is stored as given; it is not checked against
    existing users.
    """

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
    ) -> CreateShiftCommand:
        return cls(
            shift_repository=factory.shift_repository(),
            caller=caller,
            overlap_policy=overlap_policy,
        )

    async def execute(  # NOQA: PLR0913
        self,
        employee_id: UUID,
        day: str,
        start_time: str,
        end_time: str,
        task: str,
    ) -> ShiftWriteResult:
        self._caller.require_manager()

        shift = Shift.create(
            employee_id=employee_id,
            day=day,
            start_time=start_time,
            end_time=end_time,
            task=task,
        )
        overlapping = await self._overlap_guard.check(shift)
        await self._shift_repo.save(shift)

        logger.info(
            "Shift created: %s (employee %s, %s %s-%s)",
            shift.id,
            shift.employee_id,
            shift.day,
            shift.start_time,
            shift.end_time,
        )
        return ShiftWriteResult(shift=shift, overlapping_shift_ids=overlapping)
