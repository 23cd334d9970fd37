from worksync.domain.scheduling.aggregates.shift import Shift

__all__ = ["Shift"]
