"""CQRS write side: routing commands and dispatching their events.

Exports:
    CommandBus: Facade (route, then dispatch)
    CommandRouter: First-match command handler selection
    CommandHandlerProtocol / TypedCommandHandler: Command handler contract
    HandlerRegistration: Startup registration table entry
"""

from src.application.cqrs.command_bus import CommandBus
from src.application.cqrs.command_handler import (
    CommandHandlerProtocol,
    TypedCommandHandler,
)
from src.application.cqrs.command_router import CommandRouter
from src.application.cqrs.metadata import HandlerRegistration

__all__ = [
    "CommandBus",
    "CommandHandlerProtocol",
    "CommandRouter",
    "HandlerRegistration",
    "TypedCommandHandler",
]
