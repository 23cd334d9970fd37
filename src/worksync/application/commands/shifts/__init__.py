from worksync.application.commands.shifts.create_shift_command import (
    CreateShiftCommand,
)
from worksync.application.commands.shifts.delete_shift_command import (
    DeleteShiftCommand,
)
from worksync.application.commands.shifts.migrate_day_formats_command import (
    MigrateDayFormatsCommand,
)
from worksync.application.commands.shifts.update_shift_command import (
    UpdateShiftCommand,
)

__all__ = [
    "CreateShiftCommand",
    "DeleteShiftCommand",
    "MigrateDayFormatsCommand",
    "UpdateShiftCommand",
]
