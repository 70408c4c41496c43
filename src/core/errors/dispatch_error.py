"""Dispatch error returned when a synchronous event handler fails.

The fan-out engine converts the first failing sync handler invocation (raised
exception or returned ``Failure``) into a DispatchError and hands it back as
``Failure(error=DispatchError(...))``. The command bus returns it unchanged.

Usage:
    match await command_bus.handle(command):
        case Failure(error=DispatchError(handler_name=name)):
            logger.warning("projection_failed", handler=name)
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DispatchError(DomainError):
    """Synchronous event handler failure.

    Attributes:
        code: EVENT_HANDLER_FAILED (raised) or EVENT_HANDLER_RETURNED_FAILURE.
        message: Human-readable message naming handler and event.
        details: String context (event_type, event_id, handler).
        event_type: Class name of the event being dispatched.
        event_id: String form of the event's identifier.
        handler_name: Class name of the failing handler.
        cause: The raised exception, or the error carried by the returned
            ``Failure``.
    """

    event_type: str
    event_id: str
    handler_name: str
    cause: Any = None
