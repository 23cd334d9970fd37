from collections.abc import Iterable

from worksync.domain.scheduling.aggregates import Shift


def find_overlapping(shift: Shift, candidates: Iterable[Shift]) -> list[Shift]:
    """Return the candidates that double-book the shift's employee."""
    return [other for other in candidates if shift.overlaps(other)]
