"""Base command class.

Pattern:
- Commands are data containers (no logic)
- Frozen (immutable) and keyword-only, like every subclass must be
- Handlers turn a command into domain events; commands never carry results

Example:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class AddItemToCart(Command):
    ...     cart_id: str
    ...     product_id: str
    >>>
    >>> result = await command_bus.handle(AddItemToCart(cart_id="c-1", product_id="p-9"))
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Command:
    """Base class for all commands (no shared fields)."""
