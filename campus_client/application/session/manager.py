"""Session manager: the single owner of "who is logged in".

Keeps three copies of the credential in agreement:
    - the token store (persists across restarts)
    - the HTTP client's default Authorization header
    - the in-memory SessionState

All three are written together inside one synchronous step, after the
network call has resolved and the attempt's generation still matches. An
attempt overtaken by a later login, registration or logout is discarded and
reports "Authentication superseded" instead of resurrecting a session.

Flow (login):
    1. Dispatch AuthenticationStarted (AUTHENTICATING, last_error cleared)
    2. Publish UserLoginAttempted
    3. Call the auth gateway
    4. Generation changed meanwhile → discard
    5a. Success → store token, set header, dispatch AuthenticationSucceeded
    5b. Failure → dispatch AuthenticationFailed then FailureSettled
    6. Publish UserLoginSucceeded / UserLoginFailed

Failures are returned as values (`Failure(message)`), never raised.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from campus_client.application.commands import LoginUser, RegisterUser
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
from campus_client.application.session.reducer import reduce_session
from campus_client.application.session.state import SessionState, initial_state
from campus_client.core.constants import (
    LOGIN_FAILED_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    REGISTRATION_FAILED_MESSAGE,
    SUPERSEDED_MESSAGE,
)
from campus_client.core.result import Failure, Result, Success
from campus_client.domain.entities import UserProfile
from campus_client.domain.enums import SessionStatus
from campus_client.domain.errors import ApiError, ApiNetworkError
from campus_client.domain.events import (
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
from campus_client.domain.protocols import (
    AuthGatewayProtocol,
    BearerHeaderProtocol,
    EventBusProtocol,
    LoggerProtocol,
    TokenStoreProtocol,
)

type StateListener = Callable[[SessionState], None]


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthOutcome:
    """Result of a successful login or registration.

    Attributes:
        user: Profile returned by the backend (None when registration
            returned no user).
        session_created: Whether a session was stored. Always True for
            login; False for registrations awaiting verification.
        message: Backend's success message, if any.
    """

    user: UserProfile | None
    session_created: bool
    message: str | None = None


def failure_message(error: ApiError, fallback: str) -> str:
    """Message shown for a failed login/registration.

    The backend's message wins; a missing response reads as a network error;
    anything else gets the action's fallback.
    """
    if error.server_message:
        return error.server_message
    if isinstance(error, ApiNetworkError):
        return NETWORK_ERROR_MESSAGE
    return fallback


class SessionManager:
    """Process-wide session store with login, registration and restore.

    Create one per application and inject it where needed; tests create
    their own isolated instances.

    Attributes:
        _auth_gateway: Backend auth endpoints.
        _http_client: Owner of the default Authorization header.
        _token_store: Persistent credential storage.
        _event_bus: Receives session lifecycle events.
        _logger: Structured logger.

    Example:
        >>> manager = create_session_manager()
        >>> await manager.bootstrap()
        >>> match await manager.login("a@b.com", "secret"):
        ...     case Success(value=outcome):
        ...         go_to_dashboard(outcome.user.role)
        ...     case Failure(error=message):
        ...         toast(message)
    """

    def __init__(
        self,
        *,
        auth_gateway: AuthGatewayProtocol,
        http_client: BearerHeaderProtocol,
        token_store: TokenStoreProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._auth_gateway = auth_gateway
        self._http_client = http_client
        self._token_store = token_store
        self._event_bus = event_bus
        self._logger = logger
        self._state = initial_state()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SessionState:
        """Current snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call listener with every new state.

        Args:
            listener: Synchronous callable receiving the new SessionState.

        Returns:
            Function removing the listener (safe to call more than once).
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ═══════════════════════════════════════════════════════════════
    # Actions
    # ═══════════════════════════════════════════════════════════════

    async def bootstrap(self) -> None:
        """Restore the persisted session, once per manager.

        No-op unless the manager is still IDLE. Without a persisted token the
        manager goes straight to READY with no network call. Any failure of
        `GET /me` is a silent logout: the token is dropped and no error is
        surfaced.
        """
        if self._state.status is not SessionStatus.IDLE:
            self._logger.debug("session_bootstrap_skipped", status=self._state.status.value)
            return

        token = self._token_store.load()
        if not token:
            self._dispatch(RestoreSkipped())
            self._logger.debug("session_restore_skipped")
            return

        self._http_client.set_bearer_token(token)
        generation = self._dispatch(RestoreStarted(credential=token)).generation

        result = await self._auth_gateway.get_current_user()

        if generation != self._state.generation:
            self._logger.info("session_restore_discarded", generation=generation)
            return

        match result:
            case Success(value=user_payload):
                identity = UserProfile.from_api(user_payload)
                self._dispatch(RestoreSucceeded(identity=identity, generation=generation))
                self._logger.info("session_restored", user_id=identity.id, role=identity.role)
                await self._event_bus.publish(SessionRestoreSucceeded(user_id=identity.id))

            case Failure(error=error):
                self._clear_credential()
                self._dispatch(RestoreFailed(generation=generation))
                self._logger.info(
                    "session_restore_failed",
                    error_code=error.code.value,
                    status_code=error.status_code,
                )
                await self._event_bus.publish(SessionRestoreFailed(reason=error.message))

    async def login(self, email: str, password: str) -> Result[AuthOutcome, str]:
        """Log in with email and password.

        Returns:
            Success(AuthOutcome) with the stored session.
            Failure(str) with the message also kept in `last_error`.
        """
        return await self.authenticate(LoginUser(email=email, password=password))

    async def authenticate(self, command: LoginUser) -> Result[AuthOutcome, str]:
        """Execute a LoginUser command (see `login`)."""
        generation = self._begin_attempt()
        await self._event_bus.publish(UserLoginAttempted(email=command.email))

        result = await self._auth_gateway.login(command.email, command.password)

        if generation != self._state.generation:
            return self._superseded("login")

        match result:
            case Failure(error=error):
                message = failure_message(error, LOGIN_FAILED_MESSAGE)
            case Success(value=payload) if payload.has_session:
                identity = UserProfile.from_api(payload.user)
                self._store_session(payload.token, identity, generation)
                self._logger.info("user_logged_in", user_id=identity.id, role=identity.role)
                await self._event_bus.publish(
                    UserLoginSucceeded(user_id=identity.id, role=identity.role)
                )
                return Success(
                    value=AuthOutcome(
                        user=identity, session_created=True, message=payload.message
                    )
                )
            case _:
                message = LOGIN_FAILED_MESSAGE

        self._fail(message, generation)
        self._logger.info("user_login_failed", reason=message)
        await self._event_bus.publish(UserLoginFailed(email=command.email, reason=message))
        return Failure(error=message)

    async def register(self, command: RegisterUser) -> Result[AuthOutcome, str]:
        """Create an account.

        When the backend answers with a user and a token the session is
        stored, whatever the role. When it answers success without a token
        (accounts awaiting verification) nothing is stored and the outcome
        reports `session_created=False` with the backend's message.

        Returns:
            Success(AuthOutcome) on acceptance.
            Failure(str) with the message also kept in `last_error`.
        """
        fields, files = command.to_multipart()
        generation = self._begin_attempt()
        await self._event_bus.publish(
            UserRegistrationAttempted(email=command.email, role=command.role)
        )

        result = await self._auth_gateway.register(fields, files or None)

        if generation != self._state.generation:
            return self._superseded("register")

        match result:
            case Failure(error=error):
                message = failure_message(error, REGISTRATION_FAILED_MESSAGE)
                self._fail(message, generation)
                self._logger.info("user_registration_failed", role=command.role, reason=message)
                await self._event_bus.publish(
                    UserRegistrationFailed(email=command.email, reason=message)
                )
                return Failure(error=message)

            case Success(value=payload):
                user = UserProfile.from_api(payload.user) if payload.user is not None else None
                if payload.has_session and user is not None:
                    self._store_session(payload.token, user, generation)
                    session_created = True
                else:
                    self._dispatch(RegistrationAcknowledged(generation=generation))
                    session_created = False

                self._logger.info(
                    "user_registered",
                    role=command.role,
                    session_created=session_created,
                )
                await self._event_bus.publish(
                    UserRegistrationSucceeded(
                        email=command.email,
                        role=command.role,
                        session_created=session_created,
                    )
                )
                return Success(
                    value=AuthOutcome(
                        user=user,
                        session_created=session_created,
                        message=payload.message,
                    )
                )

    def logout(self) -> None:
        """Clear the session everywhere. Synchronous and idempotent.

        Any attempt still in flight is discarded when it resolves.
        """
        was_authenticated = self._state.is_authenticated
        self._clear_credential()
        self._dispatch(LoggedOut())
        if was_authenticated:
            self._logger.info("user_logged_out")

    def update_user(self, payload: UserProfile | Mapping[str, Any]) -> None:
        """Replace the cached identity (after a profile edit).

        Ignored while nobody is logged in.
        """
        identity = payload if isinstance(payload, UserProfile) else UserProfile.from_api(payload)
        if self._state.credential is None:
            self._logger.debug("session_user_update_ignored")
            return
        self._dispatch(UserUpdated(identity=identity))

    def clear_error(self) -> None:
        self._dispatch(ErrorCleared())

    async def handle_session_invalidated(self, event: SessionInvalidated) -> None:
        """Event bus handler: a non-auth request got 401, so log out."""
        self._logger.warning(
            "session_invalidated",
            path=event.path,
            status_code=event.status_code,
        )
        self.logout()

    # ═══════════════════════════════════════════════════════════════
    # Queries
    # ═══════════════════════════════════════════════════════════════

    def has_role(self, role: str) -> bool:
        identity = self._state.identity
        return identity is not None and identity.role == role

    def has_any_role(self, roles: Iterable[str]) -> bool:
        identity = self._state.identity
        if identity is None:
            return False
        return any(identity.role == role for role in roles)

    def is_verified(self) -> bool:
        identity = self._state.identity
        return identity is not None and identity.is_verified

    def is_blocked(self) -> bool:
        identity = self._state.identity
        return identity is not None and identity.is_blocked

    # ═══════════════════════════════════════════════════════════════
    # Internals
    # ═══════════════════════════════════════════════════════════════

    def _dispatch(self, action: SessionAction) -> SessionState:
        new_state = reduce_session(self._state, action)
        if new_state is self._state:
            return new_state

        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception as e:
                self._logger.warning(
                    "session_listener_failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
        return new_state

    def _begin_attempt(self) -> int:
        """Start a login/registration and return its generation."""
        abandoning_restore = (
            self._state.credential is not None and self._state.identity is None
        )
        generation = self._dispatch(AuthenticationStarted()).generation
        if abandoning_restore:
            self._clear_credential()
        return generation

    def _store_session(self, token: str, identity: UserProfile, generation: int) -> None:
        self._token_store.save(token)
        self._http_client.set_bearer_token(token)
        self._dispatch(
            AuthenticationSucceeded(
                identity=identity, credential=token, generation=generation
            )
        )

    def _fail(self, message: str, generation: int) -> None:
        self._dispatch(AuthenticationFailed(message=message, generation=generation))
        self._dispatch(FailureSettled())

    def _clear_credential(self) -> None:
        self._token_store.clear()
        self._http_client.clear_bearer_token()

    def _superseded(self, action: str) -> Failure[str]:
        self._logger.info("session_attempt_discarded", action=action)
        return Failure(error=SUPERSEDED_MESSAGE)
