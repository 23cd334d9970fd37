"""Schedule router: week view and personal schedule."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query

from worksync.application.queries import MyScheduleQuery, WeekViewQuery
from worksync.presentation.api.dependencies import (
    Caller,
    ClockDep,
    RepoFactory,
    SettingsDep,
)
from worksync.presentation.api.schemas.common import ErrorResponse
from worksync.presentation.api.schemas.schedule import (
    DayScheduleResponse,
    WeekViewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

OffsetFilter = Annotated[
    int,
    Query(description="Weeks relative to the current one (negative = past)"),
]
EmployeeFilter = Annotated[
    Optional[UUID],
    Query(alias="employeeId", description="Managers only: one employee's week"),
]


@router.get(
    "/week",
    summary="Week view",
    responses={
        400: {"model": ErrorResponse, "description": "Week offset out of range"},
        403: {
            "model": ErrorResponse,
            "description": "Employees may only view their own week",
        },
    },
)
async def week_view(  # NOQA: PLR0913
    caller: Caller,
    factory: RepoFactory,
    clock: ClockDep,
    settings: SettingsDep,
    offset: OffsetFilter = 0,
    employee_id: EmployeeFilter = None,
) -> WeekViewResponse:
    """
    Seven days Monday..Sunday with the shifts of each day.

    Managers see the whole team (or one employee); employees see their own
    shifts. ``daysWithShifts`` repeats the days that have at least one shift.
    """
    query = WeekViewQuery.from_factory(
        factory,
        clock=clock,
        caller=caller,
        locale=settings.schedule_locale,
    )
    view = await query.execute(offset_weeks=offset, employee_id=employee_id)
    return WeekViewResponse.from_dto(view)


@router.get("/mine", summary="My schedule")
async def my_schedule(
    caller: Caller,
    factory: RepoFactory,
    settings: SettingsDep,
) -> list[DayScheduleResponse]:
    """All of the caller's shifts grouped by day, earliest day first."""
    query = MyScheduleQuery.from_factory(
        factory,
        caller,
        locale=settings.schedule_locale,
    )
    days = await query.execute()
    return [DayScheduleResponse.from_dto(d) for d in days]
