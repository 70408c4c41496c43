"""Domain enums.

Available Enums:
    - HandlerGroup: Concurrency class of an event handler (sync, async)
"""

from src.domain.enums.handler_group import HandlerGroup

__all__ = [
    "HandlerGroup",
]
