"""SQLAlchemy implementation of ShiftRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from worksync.domain.scheduling import (
    UNKNOWN_MEMBER,
    ScheduledShift,
    Shift,
    ShiftRepository,
    is_canonical_day,
)
from worksync.infrastructure.persistence.sqlalchemy.models import (
    ShiftModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class ShiftRepositorySQLAlchemy(ShiftRepository):
    """
    SQLAlchemy implementation of the ShiftRepository interface.

    Employee names are resolved with an outer join on ``users``, so shifts
    pointing at missing users still come back (as ``Unknown Member``).
    Day ranges compare the ``day`` column lexically; rows that are not in
    canonical ``YYYY-MM-DD`` form are filtered out after loading because a
    lexical comparison says nothing about them.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, shift_id: UUID) -> Optional[Shift]:
        model = await self._find_model_by_id(shift_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_employee(self, employee_id: UUID) -> list[Shift]:
        stmt = (
            select(ShiftModel)
            .where(ShiftModel.employee_id == employee_id)
            .order_by(ShiftModel.pk)
        )
        return await self._fetch(stmt)

    async def find_by_day(self, day: str) -> list[Shift]:
        stmt = select(ShiftModel).where(ShiftModel.day == day).order_by(ShiftModel.pk)
        return await self._fetch(stmt)

    async def find_by_date_range(
        self,
        start_day: str,
        end_day: str,
        employee_id: Optional[UUID] = None,
    ) -> list[ScheduledShift]:
        return await self.find_with_filters(
            start_day=start_day,
            end_day=end_day,
            employee_id=employee_id,
        )

    async def find_with_filters(
        self,
        start_day: Optional[str] = None,
        end_day: Optional[str] = None,
        employee_id: Optional[UUID] = None,
    ) -> list[ScheduledShift]:
        stmt = (
            select(ShiftModel, UserModel.name)
            .outerjoin(UserModel, UserModel.id == ShiftModel.employee_id)
            .order_by(ShiftModel.pk)
        )
        if start_day is not None:
            stmt = stmt.where(ShiftModel.day >= start_day)
        if end_day is not None:
            stmt = stmt.where(ShiftModel.day <= end_day)
        if employee_id is not None:
            stmt = stmt.where(ShiftModel.employee_id == employee_id)

        result = await self._session.execute(stmt)
        bounded = start_day is not None or end_day is not None

        scheduled = []
        for model, employee_name in result.all():
            if bounded and not is_canonical_day(model.day):
                logger.debug("Skipping shift %s with non-canonical day", model.id)
                continue
            scheduled.append(self._map_to_scheduled(model, employee_name))
        return scheduled

    async def find_all(self) -> list[Shift]:
        return await self._fetch(select(ShiftModel).order_by(ShiftModel.pk))

    async def find_non_canonical(self) -> list[Shift]:
        shifts = await self.find_all()
        return [s for s in shifts if not is_canonical_day(s.day)]

    async def save(self, shift: Shift) -> None:
        existing = await self._find_model_by_id(shift.id)

        if existing:
            self._update_model(existing, shift)
            logger.debug("Updated shift: %s", shift.id)
        else:
            self._session.add(self._map_to_model(shift))
            logger.debug("Added shift: %s", shift.id)

        await self._session.flush()

    async def delete(self, shift_id: UUID) -> bool:
        stmt = delete(ShiftModel).where(ShiftModel.id == shift_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    async def _fetch(self, stmt: Select) -> list[Shift]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _find_model_by_id(self, shift_id: UUID) -> Optional[ShiftModel]:
        stmt = select(ShiftModel).where(ShiftModel.id == shift_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_scheduled(
        self,
        model: ShiftModel,
        employee_name: Optional[str],
    ) -> ScheduledShift:
        if employee_name is None:
            return ScheduledShift(
                shift=self._map_to_domain(model),
                employee_name=UNKNOWN_MEMBER,
            )
        return ScheduledShift(
            shift=self._map_to_domain(model),
            employee_name=employee_name,
            employee_found=True,
        )

    def _map_to_domain(self, model: ShiftModel) -> Shift:
        return Shift.reconstitute(
            id=model.id,
            employee_id=model.employee_id,
            day=model.day,
            start_time=model.start_time,
            end_time=model.end_time,
            task=model.task,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, shift: Shift) -> ShiftModel:
        return ShiftModel(
            id=shift.id,
            employee_id=shift.employee_id,
            day=shift.day,
            start_time=shift.start_time,
            end_time=shift.end_time,
            task=shift.task,
            created_at=shift.created_at,
            updated_at=shift.updated_at,
        )

    def _update_model(self, model: ShiftModel, shift: Shift) -> None:
        model.employee_id = shift.employee_id
        model.day = shift.day
        model.start_time = shift.start_time
        model.end_time = shift.end_time
        model.task = shift.task
        model.updated_at = shift.updated_at
