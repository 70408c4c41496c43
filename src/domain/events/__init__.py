"""Domain events module.

Exports the DomainEvent base class. Concrete events live with the code that
produces them (command handlers) and subclass DomainEvent.

Usage:
    >>> from dataclasses import dataclass
    >>> from src.domain.events import DomainEvent
    >>>
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class ItemAddedToCart(DomainEvent):
    ...     cart_id: str
    ...     product_id: str
"""

from src.domain.events.base_event import DomainEvent

__all__ = [
    "DomainEvent",
]
