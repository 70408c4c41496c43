"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DispatchError, DomainError
"""

from src.core.errors.dispatch_error import DispatchError
from src.core.errors.domain_error import DomainError

__all__ = [
    "DispatchError",
    "DomainError",
]
