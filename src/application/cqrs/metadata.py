"""Registration metadata types.

The startup registration table is a list of HandlerRegistration entries.
The container walks the table once, appends each handler to its group in the
handler registry, then seals the registry.

Design Principles:
- Immutable (frozen=True) - registration entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment

Example:
    >>> EVENT_HANDLERS = [
    ...     HandlerRegistration(handler=ProjectionHandler(), group=HandlerGroup.SYNC),
    ...     HandlerRegistration(handler=SearchIndexHandler(), group=HandlerGroup.ASYNC),
    ... ]
    >>> configure_dispatch(command_handlers=[AddItemToCartHandler()], registrations=EVENT_HANDLERS)
"""

from dataclasses import dataclass

from src.domain.enums.handler_group import HandlerGroup
from src.domain.protocols.event_handler_protocol import EventHandlerProtocol


@dataclass(frozen=True, kw_only=True)
class HandlerRegistration:
    """One event handler placed into one concurrency group.

    Attributes:
        handler: Constructed event handler instance.
        group: SYNC (gates the command outcome) or ASYNC (detached).
    """

    handler: EventHandlerProtocol
    group: HandlerGroup

    @property
    def handler_name(self) -> str:
        """Class name of the registered handler (for logs)."""
        return type(self.handler).__name__
