"""Domain protocols (ports) package.

This package contains protocol definitions that the dispatch core needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import EventHandlerProtocol, LoggerProtocol
"""

from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
from src.domain.protocols.event_handler_protocol import (
    EventHandlerProtocol,
    TypedEventHandler,
)
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "EventDispatcherProtocol",
    "EventHandlerProtocol",
    "LoggerProtocol",
    "TypedEventHandler",
]
