"""Shift schemas for request/response models."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from worksync.domain.scheduling import ScheduledShift
from worksync.presentation.api.schemas.common import CamelModel


class ShiftResponse(CamelModel):
    """A shift with the display name of its employee."""

    id: UUID
    employee_id: UUID
    employee_name: str
    day: str = Field(..., description="YYYY-MM-DD")
    start_time: str = Field(..., description="HH:MM")
    end_time: str = Field(..., description="HH:MM")
    task: str

    @classmethod
    def from_scheduled(cls, entry: ScheduledShift) -> ShiftResponse:
        shift = entry.shift
        return cls(
            id=shift.id,
            employee_id=shift.employee_id,
            employee_name=entry.employee_name,
            day=shift.day,
            start_time=shift.start_time,
            end_time=shift.end_time,
            task=shift.task,
        )


class ShiftCreateRequest(CamelModel):
    """Request schema for scheduling a shift."""

    employee_id: UUID
    day: str = Field(..., description="YYYY-MM-DD (DD.MM.YYYY is converted)")
    start_time: str = Field(..., description="HH:MM, 24-hour")
    end_time: str = Field(..., description="HH:MM, 24-hour")
    task: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "employeeId": "3f1c2b9e-8a4d-4c1e-9f5b-2d7e6a1b0c3d",
                "day": "2025-07-14",
                "startTime": "09:00",
                "endTime": "17:00",
                "task": "Front desk",
            },
        },
    )


class ShiftCreatedResponse(CamelModel):
    id: UUID
    overlapping_shift_ids: list[UUID] = Field(default_factory=list)


class ShiftUpdateRequest(CamelModel):
    """Partial update; omitted fields are left unchanged."""

    employee_id: Optional[UUID] = None
    day: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    task: Optional[str] = None


class DayMigrationResponse(CamelModel):
    converted: int
    removed: int
