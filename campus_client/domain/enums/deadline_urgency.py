"""Deadline urgency buckets used to color countdowns."""

from enum import Enum


class DeadlineUrgency(str, Enum):
    """How close a deadline is.

    NONE: No deadline set.
    EXPIRED: Deadline has passed.
    CRITICAL: Three days or fewer remain.
    WARNING: A week or less remains.
    NORMAL: More than a week remains.
    """

    NONE = "none"
    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"
