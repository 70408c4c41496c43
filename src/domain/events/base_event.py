"""Base domain event class.

Domain events represent "things that happened" and are always named in past
tense (e.g., ItemAddedToCart). They are produced only by command handlers and
consumed by event handlers in the sync and async groups.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID v7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class ItemAddedToCart(DomainEvent):
    ...     cart_id: str
    ...     product_id: str
    >>>
    >>> event = ItemAddedToCart(cart_id="cart-1", product_id="sku-42")
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (ItemAddedToCart, NOT AddItemToCart)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v7 if not provided. Used in logs and dispatch errors to
            correlate a failure with the event that triggered it.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - Events are facts: handlers never mutate them
        - Event handlers select events with isinstance checks against the
          concrete subclass, never by class name string
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
