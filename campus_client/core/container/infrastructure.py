"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (console, JSON outside development)
- Event bus (in-memory)
- Token store (JSON file when configured, memory otherwise)
- HTTP client and endpoint aggregate
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from campus_client.core.config import settings

if TYPE_CHECKING:
    from campus_client.domain.protocols.event_bus_protocol import EventBusProtocol
    from campus_client.domain.protocols.logger_protocol import LoggerProtocol
    from campus_client.domain.protocols.token_store_protocol import TokenStoreProtocol
    from campus_client.infrastructure.api.campus_api import CampusAPI
    from campus_client.infrastructure.http.api_client import CampusApiClient


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from campus_client.infrastructure.logging.console_adapter import ConsoleAdapter

    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=not settings.is_development, level=level)


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions are made by whoever owns the handler; see
    `create_session_manager` for the session invalidation wiring.
    """
    from campus_client.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    return InMemoryEventBus(logger=get_logger())


@lru_cache()
def get_token_store() -> "TokenStoreProtocol":
    """Get token store singleton (app-scoped).

    Returns:
        FileTokenStore when TOKEN_STORE_PATH is set, MemoryTokenStore otherwise.
    """
    if settings.token_store_path is not None:
        from campus_client.infrastructure.storage.file_token_store import FileTokenStore

        return FileTokenStore(settings.token_store_path, key=settings.token_storage_key)

    from campus_client.infrastructure.storage.memory_token_store import MemoryTokenStore

    return MemoryTokenStore()


@lru_cache()
def get_api_client() -> "CampusApiClient":
    """Get the shared HTTP client (owner of the Authorization header)."""
    from campus_client.infrastructure.http.api_client import CampusApiClient

    return CampusApiClient(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        event_bus=get_event_bus(),
    )


@lru_cache()
def get_campus_api() -> "CampusAPI":
    """Get the endpoint aggregate over the shared HTTP client."""
    from campus_client.infrastructure.api.campus_api import CampusAPI

    return CampusAPI(get_api_client(), auth_prefix=settings.auth_path)
