"""Event handler protocol (port) for the fan-out engine.

An event handler opts in to specific events through ``supports`` and performs
its side effect in ``handle``. Whether its completion gates the command
outcome is decided at registration time (HandlerGroup), not by the handler.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - TypedEventHandler: optional base class implementing ``supports`` as an
      isinstance test against the ``handles`` tuple

Usage:
    >>> class ProjectionHandler(TypedEventHandler):
    ...     handles = (ItemAddedToCart,)
    ...
    ...     async def handle(self, event: ItemAddedToCart) -> None:
    ...         await projection.upsert(event.cart_id, event.product_id)
    >>>
    >>> registry.register(ProjectionHandler(), HandlerGroup.SYNC)
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol

from src.domain.events.base_event import DomainEvent


class EventHandlerProtocol(Protocol):
    """Contract every event handler satisfies.

    Failure Semantics:
        A handler fails by raising an ``Exception`` or by returning a
        ``Failure``. Any other return value (including ``None``) is success
        and is otherwise ignored.
    """

    def supports(self, event: DomainEvent) -> bool:
        """Return True if this handler wants to receive ``event``.

        Called synchronously before any handler work starts. Must be cheap
        and side-effect free.
        """
        ...

    async def handle(self, event: DomainEvent) -> Any:
        """Perform the handler's side effect for ``event``."""
        ...


class TypedEventHandler(ABC):
    """Base class selecting events by type.

    Subclasses list the event classes they accept in ``handles``; subclasses
    of those event classes are accepted as well.

    Attributes:
        handles: Event classes this handler supports.
    """

    handles: ClassVar[tuple[type[DomainEvent], ...]] = ()

    def supports(self, event: DomainEvent) -> bool:
        """Return True when ``event`` is an instance of a handled class."""
        return isinstance(event, self.handles)

    @abstractmethod
    async def handle(self, event: Any) -> Any:
        """Perform the handler's side effect for ``event``."""
