"""Pure session transition function.

`reduce_session(state, action)` never performs I/O; the manager performs side
effects and dispatches the outcome. Unknown actions and stale resolutions
return the state unchanged.
"""

from dataclasses import replace

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
from campus_client.application.session.state import SessionState
from campus_client.domain.enums import SessionStatus


def reduce_session(state: SessionState, action: SessionAction) -> SessionState:
    """Fold one action into the session state.

    Args:
        state: Current snapshot.
        action: Action to apply.

    Returns:
        Next snapshot (the same object when nothing changes).
    """
    match action:
        case RestoreStarted(credential=credential):
            return replace(
                state,
                credential=credential,
                identity=None,
                status=SessionStatus.RESTORING,
                last_error=None,
                generation=state.generation + 1,
            )

        case RestoreSucceeded(identity=identity, generation=generation):
            if generation != state.generation or state.credential is None:
                return state
            return replace(state, identity=identity, status=SessionStatus.READY)

        case RestoreFailed(generation=generation):
            if generation != state.generation:
                return state
            return replace(
                state,
                credential=None,
                identity=None,
                status=SessionStatus.READY,
            )

        case RestoreSkipped():
            return replace(
                state,
                credential=None,
                identity=None,
                status=SessionStatus.READY,
            )

        case AuthenticationStarted():
            # A credential still awaiting its identity is abandoned
            return replace(
                state,
                credential=state.credential if state.identity is not None else None,
                status=SessionStatus.AUTHENTICATING,
                last_error=None,
                generation=state.generation + 1,
            )

        case AuthenticationSucceeded(
            identity=identity, credential=credential, generation=generation
        ):
            if generation != state.generation:
                return state
            return replace(
                state,
                credential=credential,
                identity=identity,
                status=SessionStatus.READY,
                last_error=None,
            )

        case AuthenticationFailed(message=message, generation=generation):
            if generation != state.generation:
                return state
            return replace(state, status=SessionStatus.FAILED, last_error=message)

        case RegistrationAcknowledged(generation=generation):
            if generation != state.generation:
                return state
            return replace(state, status=SessionStatus.READY)

        case FailureSettled():
            if state.status is not SessionStatus.FAILED:
                return state
            return replace(state, status=SessionStatus.READY)

        case LoggedOut():
            if (
                state.status is SessionStatus.READY
                and state.credential is None
                and state.identity is None
                and state.last_error is None
            ):
                return state
            return SessionState(
                status=SessionStatus.READY,
                generation=state.generation + 1,
            )

        case UserUpdated(identity=identity):
            if state.credential is None:
                return state
            return replace(state, identity=identity)

        case ErrorCleared():
            if state.last_error is None:
                return state
            return replace(state, last_error=None)

        case _:
            return state
