"""Handler registry for the event fan-out engine.

Two ordered lists of event handler instances, one per concurrency class.
Populated once during startup, sealed, and only read afterwards.

Lifecycle:
    1. Container creates the registry (app-scoped singleton)
    2. configure_dispatch() registers every handler from the registration table
    3. configure_dispatch() seals the registry
    4. Dispatch reads handlers_for(group) concurrently (read-only, safe)

Thread Safety:
    - Registration is NOT thread-safe (single startup phase)
    - Reads during dispatch are safe to share across concurrent dispatches
"""

from src.domain.enums.handler_group import HandlerGroup
from src.domain.protocols.event_handler_protocol import EventHandlerProtocol


class HandlerRegistry:
    """Ordered sync/async event handler groups.

    Registration order is invocation order within a group. Duplicate
    registrations are accepted (the handler then runs twice per event).

    Attributes:
        _groups: Handlers per group, in registration order.
        _sealed: True once the registration phase has ended.
    """

    def __init__(self) -> None:
        self._groups: dict[HandlerGroup, list[EventHandlerProtocol]] = {
            HandlerGroup.SYNC: [],
            HandlerGroup.ASYNC: [],
        }
        self._sealed = False

    def register(self, handler: EventHandlerProtocol, group: HandlerGroup) -> None:
        """Append handler to the chosen group.

        Args:
            handler: Constructed event handler instance.
            group: Concurrency class (SYNC or ASYNC).

        Raises:
            RuntimeError: If called after seal() (startup wiring bug).
        """
        if self._sealed:
            raise RuntimeError(
                f"Handler registry is sealed; cannot register "
                f"{type(handler).__name__} into {HandlerGroup(group).value} group"
            )
        self._groups[HandlerGroup(group)].append(handler)

    def handlers_for(self, group: HandlerGroup) -> tuple[EventHandlerProtocol, ...]:
        """Return the group's handlers in registration order."""
        return tuple(self._groups[HandlerGroup(group)])

    def seal(self) -> None:
        """End the registration phase. Idempotent."""
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        """True once seal() has been called."""
        return self._sealed

    def __len__(self) -> int:
        return sum(len(handlers) for handlers in self._groups.values())
