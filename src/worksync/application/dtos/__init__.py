from worksync.application.dtos.schedule_dto import DaySchedule, WeekView
from worksync.application.dtos.shift_dto import DayMigrationReport, ShiftWriteResult

__all__ = ["DayMigrationReport", "DaySchedule", "ShiftWriteResult", "WeekView"]
