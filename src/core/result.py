"""Result types for railway-oriented programming.

Dispatch outcomes flow through the system as data instead of exceptions.
A command either completes (every synchronous event handler finished) or
fails with a single error value describing the first failing handler.

Usage:
    result = await command_bus.handle(AddItemToCart(cart_id="c-1", product_id="p-9"))
    match result:
        case Success():
            acknowledge()
        case Failure(error=error):
            report(error.message)

Event handlers may also return a ``Failure`` instead of raising; the fan-out
engine treats both the same way.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Payload of the outcome (``None`` for dispatch results).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value describing the failure.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
