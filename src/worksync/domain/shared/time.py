"""Time utilities for the domain layer."""

from datetime import date, datetime, timezone
from typing import Protocol
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


class Clock(Protocol):
    """Source of "today" for anything that depends on the calendar."""

    def today(self) -> date: ...


class SystemClock:
    """Clock reading the wall time in a fixed IANA timezone."""

    def __init__(self, tz_name: str = "UTC"):
        self._tz = ZoneInfo(tz_name)

    def today(self) -> date:
        return datetime.now(tz=self._tz).date()

    def __repr__(self) -> str:
        return f"SystemClock({self._tz.key!r})"


class FixedClock:
    """Clock pinned to a single day."""

    def __init__(self, day: date):
        self._day = day

    def today(self) -> date:
        return self._day

    def __repr__(self) -> str:
        return f"FixedClock({self._day.isoformat()})"
