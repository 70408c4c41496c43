"""Commands - Instructions describing an intended state change.

Commands are immutable dataclasses with imperative names (AddItemToCart).
Their identity is their concrete class; command handlers select them with
isinstance checks.
"""

from src.application.commands.base_command import Command

__all__ = [
    "Command",
]
