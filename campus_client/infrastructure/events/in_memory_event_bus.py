"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry. A client runs
in one process, so nothing more is needed.

Architecture:
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(SessionInvalidated, manager.handle_session_invalidated)
    >>> await bus.publish(SessionInvalidated(path="/jobs"))
"""

import asyncio
from collections import defaultdict

from campus_client.domain.events.base_event import DomainEvent
from campus_client.domain.protocols.event_bus_protocol import EventHandler
from campus_client.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe; designed for a single asyncio event loop.

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for handler failures and publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning) and publishing (debug).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Exact type match only.
            handler: Async function called with each published event.
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Remove one registration of handler for event_type, if present.

        Bound methods compare equal per instance, so
        `bus.unsubscribe(SessionInvalidated, manager.handle_session_invalidated)`
        detaches exactly that manager.
        """
        handlers = self._handlers.get(event_type)
        if handlers is None or handler not in handlers:
            return
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_type]

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged, never propagated.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        # Handlers may unsubscribe while the event is being delivered
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
