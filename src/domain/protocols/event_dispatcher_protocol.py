"""Event dispatcher protocol (port).

The command bus depends on this port instead of the concrete fan-out engine,
so the dispatch strategy can be swapped (e.g. a broker-backed adapter)
without touching the application layer.

Implementations:
    - EventFanoutEngine: src/infrastructure/events/event_fanout_engine.py
"""

from collections.abc import Sequence
from typing import Protocol

from src.core.errors.dispatch_error import DispatchError
from src.core.result import Result
from src.domain.events.base_event import DomainEvent


class EventDispatcherProtocol(Protocol):
    """Dispatches an ordered event sequence to the registered handler groups."""

    async def dispatch(
        self,
        events: Sequence[DomainEvent],
    ) -> Result[None, DispatchError]:
        """Dispatch ``events`` to sync and async handlers.

        Args:
            events: Events in the order the command handler produced them.

        Returns:
            Success(value=None) once every sync handler finished for every
            event. Failure(DispatchError) for the first failing sync handler.
            Async handler outcomes never affect the result.
        """
        ...
