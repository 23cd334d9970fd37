"""Demo team and shift definitions.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass

DEMO_PASSWORD = "password123"  # NOQA: S105


@dataclass(frozen=True)
class DemoUserDef:
    """Definition for a demo account."""

    key: str
    name: str
    username: str
    role: str


@dataclass(frozen=True)
class DemoShiftDef:
    """Definition for a demo shift, placed relative to today."""

    user_key: str
    day_offset: int
    start_time: str
    end_time: str
    task: str


DEMO_USERS: tuple[DemoUserDef, ...] = (
    DemoUserDef("manager", "Иван Менеджер", "менеджер", "manager"),
    DemoUserDef("alice", "Алиса Сотрудник", "алиса", "employee"),
    DemoUserDef("boris", "Борис Сотрудник", "борис", "employee"),
)

DEMO_SHIFTS: tuple[DemoShiftDef, ...] = (
    DemoShiftDef("alice", 0, "09:00", "17:00", "Поддержка клиентов"),
    DemoShiftDef("boris", 1, "10:00", "18:00", "Ввод данных"),
)
