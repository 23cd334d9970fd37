from worksync.application.queries.shifts.list_shifts_query import ListShiftsQuery

__all__ = ["ListShiftsQuery"]
