"""Value objects for derived client state.

Usage:
    from campus_client.domain.value_objects import CourseProgress, deadline_label
"""

from campus_client.domain.value_objects.course_progress import CourseProgress
from campus_client.domain.value_objects.deadline import (
    add_months,
    days_until,
    deadline_label,
    deadline_urgency,
    enrollment_days_remaining,
    parse_timestamp,
)

__all__ = [
    "CourseProgress",
    "add_months",
    "days_until",
    "deadline_label",
    "deadline_urgency",
    "enrollment_days_remaining",
    "parse_timestamp",
]
