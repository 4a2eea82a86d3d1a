"""Base domain event class.

Domain events record "things that happened" to the session and are named in
past tense (UserLoginSucceeded, SessionInvalidated).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class UserLoginSucceeded(DomainEvent):
    ...     user_id: str | None
    >>>
    >>> event = UserLoginSucceeded(user_id="u1")
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True
        4. Never carry tokens or passwords

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
