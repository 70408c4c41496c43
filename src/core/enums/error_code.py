"""Dispatch error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Event handler failures (EVENT_HANDLER_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Dispatch error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Event handler errors
    EVENT_HANDLER_FAILED = "event_handler_failed"
    EVENT_HANDLER_RETURNED_FAILURE = "event_handler_returned_failure"
