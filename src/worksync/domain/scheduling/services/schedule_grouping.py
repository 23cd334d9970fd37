"""Grouping and ordering of scheduled shifts for display."""

from collections.abc import Iterable

from worksync.domain.scheduling.calendar import is_canonical_day
from worksync.domain.scheduling.value_objects import ScheduledShift


def group_by_day(
    shifts: Iterable[ScheduledShift],
) -> dict[str, list[ScheduledShift]]:
    """
    Group shifts under their canonical day key.

    Shifts whose employee could not be resolved are left out. Within a day,
    shifts are ordered by start time; equal start times keep their input
    order.

    Returns
    -------
    Mapping of ``YYYY-MM-DD`` to shifts, keys in order of first appearance
    """
    grouped: dict[str, list[ScheduledShift]] = {}
    for entry in shifts:
        if not entry.employee_found:
            continue
        grouped.setdefault(entry.day, []).append(entry)

    for day_shifts in grouped.values():
        day_shifts.sort(key=lambda s: s.start_time)
    return grouped


def sort_flat(shifts: Iterable[ScheduledShift]) -> list[ScheduledShift]:
    """Order shifts by day, then start time.

    Rows still carrying a legacy day (not ``YYYY-MM-DD``) go after all
    canonical rows, since their text does not sort chronologically.
    """
    return sorted(
        shifts,
        key=lambda s: (not is_canonical_day(s.day), s.day, s.start_time),
    )
