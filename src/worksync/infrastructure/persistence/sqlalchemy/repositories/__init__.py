"""SQLAlchemy repository implementations organized by bounded context."""

from worksync.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from worksync.infrastructure.persistence.sqlalchemy.repositories.scheduling import (
    ShiftRepositorySQLAlchemy,
)
from worksync.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "ShiftRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
