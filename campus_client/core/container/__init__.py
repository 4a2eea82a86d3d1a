"""Container module - centralized dependency wiring.

    from campus_client.core.container import create_session_manager, get_campus_api

- infrastructure: logging, event bus, token store, HTTP client, endpoints
- session: session manager factory
"""

from campus_client.core.container.infrastructure import (
    get_api_client,
    get_campus_api,
    get_event_bus,
    get_logger,
    get_token_store,
)
from campus_client.core.container.session import create_session_manager

__all__ = [
    "create_session_manager",
    "get_api_client",
    "get_campus_api",
    "get_event_bus",
    "get_logger",
    "get_token_store",
]
