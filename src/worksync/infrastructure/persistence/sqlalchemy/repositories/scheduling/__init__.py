"""SQLAlchemy repository implementations for scheduling domain."""

from worksync.infrastructure.persistence.sqlalchemy.repositories.scheduling.shift_repository import (  # NOQA: E501
    ShiftRepositorySQLAlchemy,
)

__all__ = ["ShiftRepositorySQLAlchemy"]
