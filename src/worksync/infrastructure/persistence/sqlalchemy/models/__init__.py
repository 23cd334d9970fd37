"""SQLAlchemy models. Importing this package registers all tables."""

from worksync.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from worksync.infrastructure.persistence.sqlalchemy.models.shift_model import (
    ShiftModel,
)
from worksync.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["Base", "ShiftModel", "TimestampMixin", "UserModel"]
