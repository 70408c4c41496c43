"""Command handler contract.

A command handler owns no mutable state across calls. It claims commands
through ``supports`` and turns a claimed command into an ordered list of
domain events in ``handle``. It never publishes those events itself; the
command bus hands them to the event dispatcher.

Usage:
    >>> class AddItemToCartHandler(TypedCommandHandler):
    ...     handles = (AddItemToCart,)
    ...
    ...     def handle(self, command: AddItemToCart) -> list[DomainEvent]:
    ...         return [ItemAddedToCart(cart_id=command.cart_id, product_id=command.product_id)]
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar, Protocol

from src.application.commands.base_command import Command
from src.domain.events.base_event import DomainEvent


class CommandHandlerProtocol(Protocol):
    """Contract every command handler satisfies (structural typing)."""

    def supports(self, command: Command) -> bool:
        """Return True if this handler handles ``command``."""
        ...

    def handle(self, command: Command) -> Sequence[DomainEvent]:
        """Return the events ``command`` produced, in order (may be empty)."""
        ...


class TypedCommandHandler(ABC):
    """Base class selecting commands by type.

    Attributes:
        handles: Command classes this handler supports.
    """

    handles: ClassVar[tuple[type[Command], ...]] = ()

    def supports(self, command: Command) -> bool:
        """Return True when ``command`` is an instance of a handled class."""
        return isinstance(command, self.handles)

    @abstractmethod
    def handle(self, command: Any) -> Sequence[DomainEvent]:
        """Return the events produced by ``command``."""
