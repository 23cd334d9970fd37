from worksync.domain.scheduling.repositories.shift_repository import ShiftRepository

__all__ = ["ShiftRepository"]
