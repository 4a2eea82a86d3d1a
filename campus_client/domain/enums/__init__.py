"""Domain enums.

Available Enums:
    - UserRole: Platform roles (Student, Alumni, Recruiter, Admin)
    - SessionStatus: Session manager lifecycle states
    - DeadlineUrgency: How close a deadline is
"""

from campus_client.domain.enums.deadline_urgency import DeadlineUrgency
from campus_client.domain.enums.session_status import SessionStatus
from campus_client.domain.enums.user_role import UserRole

__all__ = [
    "DeadlineUrgency",
    "SessionStatus",
    "UserRole",
]
