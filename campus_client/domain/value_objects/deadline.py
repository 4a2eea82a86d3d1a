"""Countdown helpers for job deadlines and course access windows.

Day differences are the ceiling of the elapsed time in days, not a count of
calendar days: a deadline a few hours away is "Tomorrow", one that passed
minutes ago is still "Today".

Usage:
    from campus_client.domain.value_objects import deadline_label

    deadline_label(job["deadline"])  # "3 days left"
"""

import calendar
import math
from datetime import UTC, datetime

from campus_client.core.constants import COURSE_ACCESS_MONTHS
from campus_client.domain.enums import DeadlineUrgency

SECONDS_PER_DAY = 86_400


def parse_timestamp(value: datetime | str) -> datetime:
    """Coerce an API timestamp to an aware datetime.

    Args:
        value: datetime, or ISO-8601 string as sent by the backend
            (`2025-03-01T12:00:00.000Z`).

    Returns:
        Timezone-aware datetime (naive values are taken as UTC).

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    parsed = datetime.fromisoformat(value) if isinstance(value, str) else value
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def days_until(target: datetime | str, now: datetime | None = None) -> int:
    """Whole days until target, rounded up (negative once passed).

    Args:
        target: Deadline.
        now: Reference time (defaults to current UTC time).

    Returns:
        Ceiling of the day difference.
    """
    reference = parse_timestamp(now) if now is not None else datetime.now(UTC)
    delta = parse_timestamp(target) - reference
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def deadline_label(deadline: datetime | str | None, now: datetime | None = None) -> str:
    """Human label for a deadline.

    Returns:
        "No deadline", "Expired", "Today", "Tomorrow", "N days left" within a
        week, otherwise the ISO date.
    """
    if deadline is None:
        return "No deadline"

    days = days_until(deadline, now)
    if days < 0:
        return "Expired"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days <= 7:
        return f"{days} days left"
    return parse_timestamp(deadline).date().isoformat()


def deadline_urgency(
    deadline: datetime | str | None, now: datetime | None = None
) -> DeadlineUrgency:
    """Bucket a deadline by how soon it falls."""
    if deadline is None:
        return DeadlineUrgency.NONE

    days = days_until(deadline, now)
    if days < 0:
        return DeadlineUrgency.EXPIRED
    if days <= 3:
        return DeadlineUrgency.CRITICAL
    if days <= 7:
        return DeadlineUrgency.WARNING
    return DeadlineUrgency.NORMAL


def add_months(moment: datetime, months: int) -> datetime:
    """Shift a datetime by whole months, clamping to the target month's end.

    Args:
        moment: Starting point.
        months: Months to add (may be negative).

    Returns:
        Shifted datetime (Aug 31 + 6 months -> Feb 28/29).
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def enrollment_days_remaining(
    enrolled_at: datetime | str, now: datetime | None = None
) -> int:
    """Days left in a course's access window.

    Access lasts COURSE_ACCESS_MONTHS from enrollment; zero or less means
    the enrollment expired.
    """
    expires_at = add_months(parse_timestamp(enrolled_at), COURSE_ACCESS_MONTHS)
    return days_until(expires_at, now)
