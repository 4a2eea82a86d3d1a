"""Unit tests for the pure session reducer.

Tests cover:
- Every action's transition
- Generation bumps on starts and logout
- Stale resolutions discarded
- identity-implies-credential invariant
- Logout idempotence
"""

from dataclasses import replace

import pytest

from campus_client.application.session import (
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
    SessionState,
    UserUpdated,
    initial_state,
    reduce_session,
)
from campus_client.domain.entities import UserProfile
from campus_client.domain.enums import SessionStatus

STUDENT = UserProfile(id="u1", role="Student", is_verified=True)
RECRUITER = UserProfile(id="u2", role="Recruiter")


def _ready(**overrides) -> SessionState:
    return replace(SessionState(status=SessionStatus.READY), **overrides)


def _logged_in() -> SessionState:
    return _ready(credential="tok1", identity=STUDENT, generation=3)


@pytest.mark.unit
class TestInitialState:
    def test_idle_and_empty(self):
        state = initial_state()

        assert state.status is SessionStatus.IDLE
        assert state.credential is None
        assert state.identity is None
        assert state.last_error is None
        assert state.generation == 0
        assert state.is_loading is True
        assert state.is_authenticated is False


@pytest.mark.unit
class TestRestore:
    def test_started_sets_credential_and_bumps_generation(self):
        state = reduce_session(initial_state(), RestoreStarted(credential="abc123"))

        assert state.status is SessionStatus.RESTORING
        assert state.credential == "abc123"
        assert state.identity is None
        assert state.generation == 1
        assert state.is_loading is True

    def test_succeeded(self):
        restoring = reduce_session(initial_state(), RestoreStarted(credential="abc123"))

        state = reduce_session(restoring, RestoreSucceeded(identity=STUDENT, generation=1))

        assert state.status is SessionStatus.READY
        assert state.identity == STUDENT
        assert state.credential == "abc123"
        assert state.is_authenticated is True
        assert state.is_loading is False

    def test_failed_clears_credential(self):
        restoring = reduce_session(initial_state(), RestoreStarted(credential="abc123"))

        state = reduce_session(restoring, RestoreFailed(generation=1))

        assert state.status is SessionStatus.READY
        assert state.credential is None
        assert state.identity is None
        assert state.last_error is None

    def test_skipped(self):
        state = reduce_session(initial_state(), RestoreSkipped())

        assert state.status is SessionStatus.READY
        assert state.is_authenticated is False

    def test_stale_success_discarded(self):
        restoring = reduce_session(initial_state(), RestoreStarted(credential="abc123"))
        logged_out = reduce_session(restoring, LoggedOut())

        state = reduce_session(logged_out, RestoreSucceeded(identity=STUDENT, generation=1))

        assert state is logged_out
        assert state.identity is None


@pytest.mark.unit
class TestAuthentication:
    def test_started_clears_error(self):
        state = reduce_session(_ready(last_error="old"), AuthenticationStarted())

        assert state.status is SessionStatus.AUTHENTICATING
        assert state.last_error is None
        assert state.generation == 1

    def test_started_keeps_confirmed_session(self):
        state = reduce_session(_logged_in(), AuthenticationStarted())

        assert state.credential == "tok1"
        assert state.identity == STUDENT

    def test_started_abandons_pending_restore(self):
        restoring = reduce_session(initial_state(), RestoreStarted(credential="abc123"))

        state = reduce_session(restoring, AuthenticationStarted())

        assert state.credential is None
        assert state.generation == 2

    def test_succeeded(self):
        started = reduce_session(_ready(), AuthenticationStarted())

        state = reduce_session(
            started,
            AuthenticationSucceeded(identity=RECRUITER, credential="tok2", generation=1),
        )

        assert state.status is SessionStatus.READY
        assert state.credential == "tok2"
        assert state.identity == RECRUITER

    def test_failed_then_settled(self):
        started = reduce_session(_ready(), AuthenticationStarted())

        failed = reduce_session(
            started, AuthenticationFailed(message="Invalid credentials", generation=1)
        )
        settled = reduce_session(failed, FailureSettled())

        assert failed.status is SessionStatus.FAILED
        assert settled.status is SessionStatus.READY
        assert settled.last_error == "Invalid credentials"
        assert settled.credential is None
        assert settled.identity is None

    def test_failure_keeps_existing_session(self):
        started = reduce_session(_logged_in(), AuthenticationStarted())

        state = reduce_session(
            started, AuthenticationFailed(message="nope", generation=started.generation)
        )

        assert state.credential == "tok1"
        assert state.identity == STUDENT

    def test_settled_ignored_unless_failed(self):
        state = _ready()

        assert reduce_session(state, FailureSettled()) is state

    def test_registration_acknowledged(self):
        started = reduce_session(_ready(), AuthenticationStarted())

        state = reduce_session(started, RegistrationAcknowledged(generation=1))

        assert state.status is SessionStatus.READY
        assert state.credential is None

    @pytest.mark.parametrize(
        "resolution",
        [
            AuthenticationSucceeded(identity=RECRUITER, credential="tok2", generation=1),
            AuthenticationFailed(message="late", generation=1),
            RegistrationAcknowledged(generation=1),
        ],
    )
    def test_stale_resolutions_discarded(self, resolution):
        started = reduce_session(_ready(), AuthenticationStarted())
        logged_out = reduce_session(started, LoggedOut())

        assert reduce_session(logged_out, resolution) is logged_out

    def test_newer_attempt_wins(self):
        first = reduce_session(_ready(), AuthenticationStarted())
        second = reduce_session(first, AuthenticationStarted())

        state = reduce_session(
            second,
            AuthenticationSucceeded(identity=STUDENT, credential="old", generation=1),
        )

        assert state is second


@pytest.mark.unit
class TestLogout:
    def test_clears_everything(self):
        state = reduce_session(replace(_logged_in(), last_error="x"), LoggedOut())

        assert state.status is SessionStatus.READY
        assert state.credential is None
        assert state.identity is None
        assert state.last_error is None
        assert state.generation == 4

    def test_idempotent(self):
        once = reduce_session(_logged_in(), LoggedOut())
        twice = reduce_session(once, LoggedOut())

        assert twice == once

    def test_during_attempt_bumps_generation(self):
        started = reduce_session(_ready(), AuthenticationStarted())

        state = reduce_session(started, LoggedOut())

        assert state.generation == started.generation + 1
        assert state.status is SessionStatus.READY


@pytest.mark.unit
class TestUserUpdatedAndErrors:
    def test_user_updated(self):
        edited = replace(STUDENT, name="New Name")

        state = reduce_session(_logged_in(), UserUpdated(identity=edited))

        assert state.identity.name == "New Name"

    def test_user_updated_ignored_without_credential(self):
        state = _ready()

        assert reduce_session(state, UserUpdated(identity=STUDENT)) is state

    def test_error_cleared(self):
        state = reduce_session(_ready(last_error="boom"), ErrorCleared())

        assert state.last_error is None

    def test_error_cleared_noop(self):
        state = _ready()

        assert reduce_session(state, ErrorCleared()) is state


@pytest.mark.unit
class TestIdentityImpliesCredential:
    def test_every_transition_keeps_invariant(self):
        actions = [
            RestoreStarted(credential="abc123"),
            RestoreSucceeded(identity=STUDENT, generation=1),
            UserUpdated(identity=RECRUITER),
            AuthenticationStarted(),
            AuthenticationFailed(message="x", generation=2),
            FailureSettled(),
            LoggedOut(),
            UserUpdated(identity=STUDENT),
            AuthenticationStarted(),
            AuthenticationSucceeded(identity=STUDENT, credential="tok", generation=4),
            ErrorCleared(),
            LoggedOut(),
        ]
        state = initial_state()

        for action in actions:
            state = reduce_session(state, action)
            assert state.identity is None or state.credential is not None

        assert state.credential is None
