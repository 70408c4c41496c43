"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for dispatch failures
- Settings loading (pydantic-settings)

The core module has NO dependencies on other application layers.
"""

from src.core.enums import Environment, ErrorCode
from src.core.errors import DispatchError, DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "DispatchError",
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
