from worksync.domain.scheduling.services.overlap_detection import find_overlapping
from worksync.domain.scheduling.services.schedule_grouping import (
    group_by_day,
    sort_flat,
)

__all__ = ["find_overlapping", "group_by_day", "sort_flat"]
