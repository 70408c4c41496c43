"""Infrastructure event dispatch.

Exports:
    - HandlerRegistry: Sync/async event handler groups (init-once)
    - EventFanoutEngine: EventDispatcherProtocol adapter on asyncio

Usage:
    >>> registry = HandlerRegistry()
    >>> registry.register(ProjectionHandler(), HandlerGroup.SYNC)
    >>> registry.register(SearchIndexHandler(), HandlerGroup.ASYNC)
    >>> registry.seal()
    >>> engine = EventFanoutEngine(registry=registry, logger=logger)
"""

from src.infrastructure.events.event_fanout_engine import EventFanoutEngine
from src.infrastructure.events.handler_registry import HandlerRegistry

__all__ = [
    "EventFanoutEngine",
    "HandlerRegistry",
]
