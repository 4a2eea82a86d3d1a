"""Session manager: state, actions, reducer and the manager itself."""

from campus_client.application.session.actions import (
    AuthenticationFailed,
    AuthenticationStarted,
    AuthenticationSucceeded,
    ErrorCleared,
    FailureSettled,
    LoggedOut,
    RegistrationAcknowledged,
    RestoreFailed,
    RestoreSkipped,
    RestoreStarted,
    RestoreSucceeded,
    SessionAction,
    UserUpdated,
)
from campus_client.application.session.manager import (
    AuthOutcome,
    SessionManager,
    StateListener,
    failure_message,
)
from campus_client.application.session.reducer import reduce_session
from campus_client.application.session.state import SessionState, initial_state

__all__ = [
    "AuthOutcome",
    "AuthenticationFailed",
    "AuthenticationStarted",
    "AuthenticationSucceeded",
    "ErrorCleared",
    "FailureSettled",
    "LoggedOut",
    "RegistrationAcknowledged",
    "RestoreFailed",
    "RestoreSkipped",
    "RestoreStarted",
    "RestoreSucceeded",
    "SessionAction",
    "SessionManager",
    "SessionState",
    "StateListener",
    "UserUpdated",
    "failure_message",
    "initial_state",
    "reduce_session",
]
