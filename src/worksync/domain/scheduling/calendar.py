"""Week windows, day keys and display labels.

Shifts are stored under a canonical day key ``YYYY-MM-DD``. Lexical order of
day keys equals chronological order, which is what range queries rely on.
Older data may carry ``DD.MM.YYYY``; :func:`parse_day` converts it so the
legacy form never reaches storage.

Labels are for display only and are never compared or stored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Literal

from worksync.domain.scheduling.exceptions import (
    InvalidDayFormatError,
    InvalidTimeFormatError,
    WeekOutOfRangeError,
)

Locale = Literal["en", "ru"]

DAYS_PER_WEEK = 7

_CANONICAL_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LEGACY_DAY = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")
_TIME = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

_MONTHS: dict[str, tuple[str, ...]] = {
    "en": (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    "ru": (
        "янв.", "фев.", "мар.", "апр.", "май", "июн.",
        "июл.", "авг.", "сен.", "окт.", "ноя.", "дек.",
    ),
}

# Indexed by date.weekday() (Monday=0)
_WEEKDAYS: dict[str, tuple[str, ...]] = {
    "en": (
        "Monday", "Tuesday", "Wednesday", "Thursday",
        "Friday", "Saturday", "Sunday",
    ),
    "ru": (
        "понедельник", "вторник", "среда", "четверг",
        "пятница", "суббота", "воскресенье",
    ),
}


@dataclass(frozen=True)
class WeekRange:
    """A Monday..Sunday window."""

    start: date
    end: date
    start_label: str
    end_label: str

    @property
    def range_key(self) -> tuple[str, str]:
        return day_key(self.start), day_key(self.end)

    def days(self) -> Iterator[date]:
        for offset in range(DAYS_PER_WEEK):
            yield self.start + timedelta(days=offset)


def monday_of(day: date) -> date:
    # With Sunday=0..Saturday=6 numbering, Monday is 6 days back on a
    # Sunday and (1 - weekday) days away otherwise.
    sunday_based = (day.weekday() + 1) % DAYS_PER_WEEK
    offset = -6 if sunday_based == 0 else 1 - sunday_based
    return day + timedelta(days=offset)


def week_range(
    offset_weeks: int = 0,
    today: date | None = None,
    locale: Locale = "en",
) -> WeekRange:
    """Return the week containing ``today``, shifted by whole weeks.

    Parameters
    ----------
    offset_weeks
        Positive values move into the future, negative into the past
    today
        Reference day; defaults to the local date of the host
    locale
        Language of the labels
    """
    reference = today or date.today()
    try:
        start = monday_of(reference) + timedelta(weeks=offset_weeks)
        end = start + timedelta(days=DAYS_PER_WEEK - 1)
    except OverflowError:
        raise WeekOutOfRangeError(offset_weeks) from None
    return WeekRange(
        start=start,
        end=end,
        start_label=_short_label(start, locale),
        end_label=_short_label(end, locale),
    )


def day_key(day: date) -> str:
    """Canonical ``YYYY-MM-DD`` key for a date."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def day_label(day: date, locale: Locale = "en") -> str:
    """Weekday, day and month, e.g. ``Wednesday, 16 Jul``."""
    weekday = _WEEKDAYS[locale][day.weekday()]
    month = _MONTHS[locale][day.month - 1].rstrip(".")
    return f"{weekday}, {day.day} {month}"


def _short_label(day: date, locale: Locale) -> str:
    return f"{day.day:02d} {_MONTHS[locale][day.month - 1]}"


def is_canonical_day(value: str) -> bool:
    """True if ``value`` is a valid ``YYYY-MM-DD`` calendar date."""
    if not isinstance(value, str) or not _CANONICAL_DAY.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_day(value: str) -> date:
    """Parse a day key, accepting the legacy ``DD.MM.YYYY`` form too.

    Raises
    ------
    InvalidDayFormatError
        If the value is in neither format or is not a real date
    """
    if not isinstance(value, str):
        raise InvalidDayFormatError(str(value))

    value = value.strip()
    try:
        if _CANONICAL_DAY.match(value):
            return date.fromisoformat(value)

        legacy = _LEGACY_DAY.match(value)
        if legacy:
            day, month, year = (int(part) for part in legacy.groups())
            return date(year, month, day)
    except ValueError as e:
        raise InvalidDayFormatError(value) from e

    raise InvalidDayFormatError(value)


def normalize_day(value: str) -> str:
    """Return the canonical key for any accepted day representation."""
    return day_key(parse_day(value))


def validate_time(value: str) -> str:
    """Check a zero-padded 24-hour ``HH:MM`` time and return it.

    Raises
    ------
    InvalidTimeFormatError
        If the value is not ``HH:MM``
    """
    if not isinstance(value, str) or not _TIME.match(value.strip()):
        raise InvalidTimeFormatError(str(value))
    return value.strip()
