"""Domain events module.

Usage:
    >>> from campus_client.domain.events import SessionInvalidated
    >>> await event_bus.publish(SessionInvalidated(path="/jobs"))
"""

from campus_client.domain.events.base_event import DomainEvent
from campus_client.domain.events.session_events import (
    SessionInvalidated,
    SessionRestoreFailed,
    SessionRestoreSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)

__all__ = [
    "DomainEvent",
    "SessionInvalidated",
    "SessionRestoreFailed",
    "SessionRestoreSucceeded",
    "UserLoginAttempted",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserRegistrationAttempted",
    "UserRegistrationFailed",
    "UserRegistrationSucceeded",
]
