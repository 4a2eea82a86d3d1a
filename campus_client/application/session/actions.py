"""Session actions.

Each action is a frozen dataclass; `SessionAction` is their union, folded by
`reduce_session`. Resolution actions carry the generation their attempt
started under.
"""

from dataclasses import dataclass

from campus_client.domain.entities import UserProfile


@dataclass(frozen=True, slots=True, kw_only=True)
class RestoreStarted:
    """Bootstrap found a persisted token."""

    credential: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RestoreSucceeded:
    """`GET /me` accepted the persisted token."""

    identity: UserProfile
    generation: int


@dataclass(frozen=True, slots=True, kw_only=True)
class RestoreFailed:
    """Persisted token rejected or backend unreachable (silent logout)."""

    generation: int


@dataclass(frozen=True, slots=True)
class RestoreSkipped:
    """No persisted token at bootstrap."""


@dataclass(frozen=True, slots=True)
class AuthenticationStarted:
    """Login or registration request about to be sent."""


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationSucceeded:
    """Backend returned a user and token."""

    identity: UserProfile
    credential: str
    generation: int


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationFailed:
    """Backend rejected the attempt or no response came back."""

    message: str
    generation: int


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistrationAcknowledged:
    """Registration accepted without a session (account awaits verification)."""

    generation: int


@dataclass(frozen=True, slots=True)
class FailureSettled:
    """Return from FAILED to READY, keeping last_error."""


@dataclass(frozen=True, slots=True)
class LoggedOut:
    """Session cleared by the user or by an invalidation."""


@dataclass(frozen=True, slots=True, kw_only=True)
class UserUpdated:
    """Cached identity replaced after a profile edit."""

    identity: UserProfile


@dataclass(frozen=True, slots=True)
class ErrorCleared:
    """Dismiss last_error."""


type SessionAction = (
    RestoreStarted
    | RestoreSucceeded
    | RestoreFailed
    | RestoreSkipped
    | AuthenticationStarted
    | AuthenticationSucceeded
    | AuthenticationFailed
    | RegistrationAcknowledged
    | FailureSettled
    | LoggedOut
    | UserUpdated
    | ErrorCleared
)
