"""Queries - read operations that never change state."""

from worksync.application.queries.schedule import MyScheduleQuery, WeekViewQuery
from worksync.application.queries.shifts import ListShiftsQuery
from worksync.application.queries.users import ListUsersQuery

__all__ = [
    "ListShiftsQuery",
    "ListUsersQuery",
    "MyScheduleQuery",
    "WeekViewQuery",
]
