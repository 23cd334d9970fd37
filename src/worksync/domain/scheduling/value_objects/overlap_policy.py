from enum import Enum


class OverlapPolicy(str, Enum):
    """What to do when a shift write double-books an employee.

    ALLOW keeps the historical behavior and does not look for overlaps.
    """

    ALLOW = "allow"
    REJECT = "reject"
    WARN = "warn"
