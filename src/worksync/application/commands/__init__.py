"""Commands - write operations that change state."""

from worksync.application.commands.shifts import (
    CreateShiftCommand,
    DeleteShiftCommand,
    MigrateDayFormatsCommand,
    UpdateShiftCommand,
)
from worksync.application.commands.users import CreateUserCommand, UpdateUserCommand

__all__ = [
    "CreateShiftCommand",
    "CreateUserCommand",
    "DeleteShiftCommand",
    "MigrateDayFormatsCommand",
    "UpdateShiftCommand",
    "UpdateUserCommand",
]
