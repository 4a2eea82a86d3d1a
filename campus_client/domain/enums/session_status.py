"""Session manager lifecycle states.

Exactly one status holds at any instant; the session reducer is the only
place that changes it.

State machine:
    IDLE -> RESTORING -> READY <-> AUTHENTICATING
    AUTHENTICATING -> FAILED -> READY   (FAILED is momentary)
    READY -> READY                       (logout: identity cleared)
"""

from enum import Enum


class SessionStatus(str, Enum):
    """Session manager lifecycle states."""

    IDLE = "idle"
    """Created, bootstrap not yet run."""

    RESTORING = "restoring"
    """Bootstrap found a persisted token and is fetching the identity."""

    AUTHENTICATING = "authenticating"
    """A login or registration request is in flight."""

    READY = "ready"
    """Settled; authenticated or not depending on the identity."""

    FAILED = "failed"
    """The last attempt failed. Always followed by READY."""
