from worksync.domain.scheduling.value_objects.overlap_policy import OverlapPolicy
from worksync.domain.scheduling.value_objects.scheduled_shift import (
    UNKNOWN_MEMBER,
    ScheduledShift,
)

__all__ = ["OverlapPolicy", "ScheduledShift", "UNKNOWN_MEMBER"]
