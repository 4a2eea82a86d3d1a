"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides the adapter (InMemoryEventBus)
    - Container wires subscribers (campus_client.core.container)

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(SessionInvalidated, manager.handle_session_invalidated)
    >>> await event_bus.publish(SessionInvalidated(path="/jobs"))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from campus_client.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: takes one event, returns None, fails open."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never propagates to the publisher.
        2. **Async handlers**: Handlers may await I/O.
        3. **Type-based routing**: Handlers registered for an event type only
           receive events of exactly that type.
        4. **No ordering guarantees** between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async function called with each published event.
        """
        ...

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Remove a handler registered with `subscribe`.

        Unknown handlers are ignored.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Notes:
            - No handlers = no-op (not an error)
            - NEVER raises exceptions (fail-open guarantee)
        """
        ...
