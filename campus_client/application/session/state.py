"""Session state value.

One immutable snapshot per transition; the reducer is the only producer of
new snapshots.

Invariants:
    - identity is set only while credential is set
    - generation increases on every auth start and every logout
"""

from dataclasses import dataclass

from campus_client.domain.entities import UserProfile
from campus_client.domain.enums import SessionStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionState:
    """Snapshot of who is logged in.

    Attributes:
        credential: Bearer token, mirrored in the token store and the HTTP
            client's Authorization header.
        identity: Profile returned by the backend for the credential. May be
            None while a restore is in flight.
        status: Lifecycle status.
        last_error: Message of the last failed login/registration.
        generation: Counter tagging each auth attempt; resolutions carrying
            an older value are discarded.
    """

    credential: str | None = None
    identity: UserProfile | None = None
    status: SessionStatus = SessionStatus.IDLE
    last_error: str | None = None
    generation: int = 0

    @property
    def is_authenticated(self) -> bool:
        """True when both credential and identity are held."""
        return self.credential is not None and self.identity is not None

    @property
    def is_loading(self) -> bool:
        """True until bootstrap settles and while an attempt is in flight."""
        return self.status in (
            SessionStatus.IDLE,
            SessionStatus.RESTORING,
            SessionStatus.AUTHENTICATING,
        )


def initial_state() -> SessionState:
    """State of a freshly created manager (IDLE, nobody logged in)."""
    return SessionState()
