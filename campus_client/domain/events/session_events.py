"""Session domain events.

Pattern: 3 events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: Action initiated (before the network call)
- *Succeeded: Session stored (after state, token store and header agree)
- *Failed: Backend rejected the attempt or no response came back

Operational event (single state):
- SessionInvalidated: The HTTP layer saw a 401 on a non-auth request. The
  session manager subscribes and logs out; the UI reacts to the resulting
  state change by navigating to the login page.

Events never carry tokens or passwords.
"""

from dataclasses import dataclass

from campus_client.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Login
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserLoginAttempted(DomainEvent):
    """Login request about to be sent.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class UserLoginSucceeded(DomainEvent):
    """Login accepted and session stored.

    Attributes:
        user_id: Identifier of the logged-in user.
        role: Raw role string.
    """

    user_id: str | None
    role: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserLoginFailed(DomainEvent):
    """Login rejected or unreachable backend.

    Attributes:
        email: Email address attempted.
        reason: Message surfaced to the user.
    """

    email: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserRegistrationAttempted(DomainEvent):
    """Registration request about to be sent.

    Attributes:
        email: Email address registering.
        role: Requested role.
    """

    email: str
    role: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationSucceeded(DomainEvent):
    """Registration accepted.

    Attributes:
        email: Registered email address.
        role: Requested role.
        session_created: Whether the backend returned a token and the session
            was stored (recruiters) or not (accounts awaiting verification).
    """

    email: str
    role: str
    session_created: bool


@dataclass(frozen=True, kw_only=True)
class UserRegistrationFailed(DomainEvent):
    """Registration rejected or unreachable backend.

    Attributes:
        email: Email address attempted.
        reason: Message surfaced to the user.
    """

    email: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Restore (bootstrap)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class SessionRestoreSucceeded(DomainEvent):
    """Persisted token accepted by `GET /me`.

    Attributes:
        user_id: Identifier of the restored user.
    """

    user_id: str | None


@dataclass(frozen=True, kw_only=True)
class SessionRestoreFailed(DomainEvent):
    """Persisted token rejected; treated as a silent logout.

    Attributes:
        reason: Internal reason (logged, never shown to the user).
    """

    reason: str


# ═══════════════════════════════════════════════════════════════
# Invalidation (operational)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class SessionInvalidated(DomainEvent):
    """A request was answered with 401; the bearer token is no longer valid.

    Attributes:
        path: Request path that was rejected.
        status_code: HTTP status (401).
    """

    path: str
    status_code: int = 401
