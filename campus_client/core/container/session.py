"""Session manager factory."""

from campus_client.application.session.manager import SessionManager
from campus_client.core.container.infrastructure import (
    get_api_client,
    get_campus_api,
    get_event_bus,
    get_logger,
    get_token_store,
)
from campus_client.domain.events import SessionInvalidated


def create_session_manager() -> SessionManager:
    """Build a session manager over the app-scoped infrastructure.

    The manager is subscribed to SessionInvalidated, so a 401 on any
    non-auth request logs it out. Call once at application start and pass
    the instance to whatever needs it.

    To retire a manager, detach it with
    `get_event_bus().unsubscribe(SessionInvalidated, manager.handle_session_invalidated)`.

    Returns:
        SessionManager in IDLE state (call `bootstrap()` next).
    """
    event_bus = get_event_bus()
    manager = SessionManager(
        auth_gateway=get_campus_api().auth,
        http_client=get_api_client(),
        token_store=get_token_store(),
        event_bus=event_bus,
        logger=get_logger(),
    )
    event_bus.subscribe(SessionInvalidated, manager.handle_session_invalidated)
    return manager
