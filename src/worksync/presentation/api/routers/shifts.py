"""Shifts router: scheduling, lookup and maintenance of shifts."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from worksync.application.commands import (
    CreateShiftCommand,
    DeleteShiftCommand,
    MigrateDayFormatsCommand,
    UpdateShiftCommand,
)
from worksync.application.queries import ListShiftsQuery
from worksync.presentation.api.dependencies import (
    Caller,
    ManagerCaller,
    RepoFactory,
    SettingsDep,
)
from worksync.presentation.api.schemas.common import ErrorResponse
from worksync.presentation.api.schemas.shifts import (
    DayMigrationResponse,
    ShiftCreatedResponse,
    ShiftCreateRequest,
    ShiftResponse,
    ShiftUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Note: Don't set default in Query() when using Annotated - set it with = instead
StartDateFilter = Annotated[
    Optional[str],
    Query(alias="startDate", description="Inclusive lower bound, YYYY-MM-DD"),
]
EndDateFilter = Annotated[
    Optional[str],
    Query(alias="endDate", description="Inclusive upper bound, YYYY-MM-DD"),
]
UserIdFilter = Annotated[
    Optional[UUID],
    Query(alias="userId", description="Only shifts of this employee"),
]


@router.get(
    "",
    summary="List shifts",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid date"},
        403: {
            "model": ErrorResponse,
            "description": "Employees may only list their own shifts",
        },
    },
)
async def list_shifts(
    caller: Caller,
    factory: RepoFactory,
    start_date: StartDateFilter = None,
    end_date: EndDateFilter = None,
    user_id: UserIdFilter = None,
) -> list[ShiftResponse]:
    """
    Flat list of shifts ordered by day, then start time.

    Employees only see their own shifts. Shifts of unknown employees are
    listed with the name ``Unknown Member``.
    """
    query = ListShiftsQuery.from_factory(factory, caller)
    shifts = await query.search(
        start_day=start_date,
        end_day=end_date,
        employee_id=user_id,
    )
    return [ShiftResponse.from_scheduled(s) for s in shifts]


@router.post(
    "/migrate-days",
    summary="Convert legacy day formats",
    responses={403: {"model": ErrorResponse, "description": "Manager role required"}},
)
async def migrate_days(
    caller: ManagerCaller,
    factory: RepoFactory,
) -> DayMigrationResponse:
    """
    Rewrite ``DD.MM.YYYY`` days to ``YYYY-MM-DD``.

    Shifts whose day cannot be read as a date are deleted.
    """
    command = MigrateDayFormatsCommand.from_factory(factory, caller)

    try:
        report = await command.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DayMigrationResponse(converted=report.converted, removed=report.removed)


@router.get(
    "/{shift_id}",
    summary="Get a shift",
    responses={
        403: {
            "model": ErrorResponse,
            "description": "Shift belongs to another employee",
        },
        404: {"model": ErrorResponse, "description": "Shift not found"},
    },
)
async def get_shift(
    shift_id: UUID,
    caller: Caller,
    factory: RepoFactory,
) -> ShiftResponse:
    entry = await ListShiftsQuery.from_factory(factory, caller).get(shift_id)
    return ShiftResponse.from_scheduled(entry)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a shift",
    responses={
        201: {"description": "Shift created"},
        400: {
            "model": ErrorResponse,
            "description": "Missing field or invalid day/time",
        },
        403: {"model": ErrorResponse, "description": "Manager role required"},
        409: {
            "model": ErrorResponse,
            "description": "Overlaps another shift (reject policy)",
        },
    },
)
async def create_shift(
    request: ShiftCreateRequest,
    caller: ManagerCaller,
    factory: RepoFactory,
    settings: SettingsDep,
) -> ShiftCreatedResponse:
    """
    Schedule a shift for an employee.

    The employee is not checked for existence. Under the ``warn`` overlap
    policy the IDs of overlapping shifts are returned; under ``reject`` the
    request fails with 409.
    """
    command = CreateShiftCommand.from_factory(
        factory,
        caller,
        overlap_policy=settings.shift_overlap_policy,
    )

    try:
        result = await command.execute(
            employee_id=request.employee_id,
            day=request.day,
            start_time=request.start_time,
            end_time=request.end_time,
            task=request.task,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return ShiftCreatedResponse(
        id=result.shift.id,
        overlapping_shift_ids=result.overlapping_shift_ids,
    )


@router.patch(
    "/{shift_id}",
    summary="Update a shift",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid day/time"},
        403: {"model": ErrorResponse, "description": "Manager role required"},
        404: {"model": ErrorResponse, "description": "Shift not found"},
        409: {
            "model": ErrorResponse,
            "description": "Overlaps another shift (reject policy)",
        },
    },
)
async def update_shift(
    shift_id: UUID,
    request: ShiftUpdateRequest,
    caller: ManagerCaller,
    factory: RepoFactory,
    settings: SettingsDep,
) -> ShiftResponse:
    command = UpdateShiftCommand.from_factory(
        factory,
        caller,
        overlap_policy=settings.shift_overlap_policy,
    )

    try:
        result = await command.execute(
            shift_id=shift_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    entry = await ListShiftsQuery.from_factory(factory, caller).scheduled(result.shift)
    return ShiftResponse.from_scheduled(entry)


@router.delete(
    "/{shift_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a shift",
    responses={
        204: {"description": "Shift deleted"},
        403: {"model": ErrorResponse, "description": "Manager role required"},
        404: {"model": ErrorResponse, "description": "Shift not found"},
    },
)
async def delete_shift(
    shift_id: UUID,
    caller: ManagerCaller,
    factory: RepoFactory,
) -> None:
    command = DeleteShiftCommand.from_factory(factory, caller)

    try:
        await command.execute(shift_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
