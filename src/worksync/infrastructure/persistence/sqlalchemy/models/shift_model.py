"""SQLAlchemy model for Shift aggregate."""

from uuid import UUID

from sqlalchemy import Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from worksync.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ShiftModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting Shift aggregates.

    ``employee_id`` has no foreign key: a shift may point at a user that
    does not exist, and readers have to cope with that.

    ``day`` is a ``YYYY-MM-DD`` string so that range filters can compare
    it lexically. Rows written before that format was enforced may hold
    ``DD.MM.YYYY``.

    Table: shifts
    """

    __tablename__ = "shifts"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False)
    employee_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    day: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    task: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ShiftModel(id={self.id}, employee_id={self.employee_id}, "
            f"day={self.day})>"
        )
