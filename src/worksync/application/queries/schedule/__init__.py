from worksync.application.queries.schedule.my_schedule_query import MyScheduleQuery
from worksync.application.queries.schedule.week_view_query import WeekViewQuery

__all__ = ["MyScheduleQuery", "WeekViewQuery"]
