"""Domain protocols (ports).

Structural protocols the application layer depends on. Infrastructure
adapters satisfy them without inheriting from them.
"""

from campus_client.domain.protocols.auth_gateway_protocol import (
    AuthGatewayProtocol,
    AuthPayload,
    BearerHeaderProtocol,
    UploadFile,
)
from campus_client.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from campus_client.domain.protocols.logger_protocol import LoggerProtocol
from campus_client.domain.protocols.token_store_protocol import TokenStoreProtocol

__all__ = [
    "AuthGatewayProtocol",
    "AuthPayload",
    "BearerHeaderProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "TokenStoreProtocol",
    "UploadFile",
]
