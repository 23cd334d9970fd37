"""Applies the configured overlap policy to shift writes."""

from __future__ import annotations

import logging
from typing import Union
from uuid import UUID

from worksync.domain.scheduling import (
    OverlapPolicy,
    Shift,
    ShiftOverlapError,
    ShiftRepository,
    find_overlapping,
)

logger = logging.getLogger(__name__)


class ShiftOverlapGuard:
    """Check a shift against the other shifts of its employee on its day."""

    def __init__(
        self,
        shift_repository: ShiftRepository,
        policy: Union[str, OverlapPolicy] = OverlapPolicy.ALLOW,
    ):
        self._shift_repo = shift_repository
        self._policy = OverlapPolicy(policy)

    @property
    def policy(self) -> OverlapPolicy:
        return self._policy

    async def check(self, shift: Shift) -> list[UUID]:
        """
        Look for overlapping shifts according to the policy.

        Returns
        -------
        IDs of overlapping shifts (only ever non-empty under ``warn``)

        Raises
        ------
        ShiftOverlapError
            Under ``reject`` when at least one overlap exists
        """
        if self._policy == OverlapPolicy.ALLOW:
            return []

        same_day = await self._shift_repo.find_by_day(shift.day)
        conflicting_ids = [other.id for other in find_overlapping(shift, same_day)]
        if not conflicting_ids:
            return []

        if self._policy == OverlapPolicy.REJECT:
            raise ShiftOverlapError(shift.employee_id, shift.day, conflicting_ids)

        logger.warning(
            "Shift %s overlaps %d shift(s) of employee %s on %s",
            shift.id,
            len(conflicting_ids),
            shift.employee_id,
            shift.day,
        )
        return conflicting_ids
