"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without raising exceptions. Failures travel in the `Err` branch as data and
are enriched with context as they cross abstraction boundaries.

Usage:
    def divide(a: float, b: float) -> Result[float, DivisionFailure]:
        if b == 0:
            return Err(error=DivisionFailure("Division by zero"))
        return Ok(value=a / b)

    result = divide(10, 2)
    match result:
        case Ok(value=value):
            print(f"Result: {value}")
        case Err(error=error):
            print(error.to_pretty_string())
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True, kw_only=True)
class Ok(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Err(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The failure that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Ok[T] | Err[E]


def map_err(result: Result[T, E], transform: Callable[[E], F]) -> Result[T, F]:
    """Transform the error of an `Err`, passing an `Ok` through untouched.

    Args:
        result: Result to transform.
        transform: Function applied to the error of an `Err`.

    Returns:
        Result[T, F]: The same `Ok` instance, or a new `Err` holding the
            transformed error.
    """
    match result:
        case Err(error=error):
            return Err(error=transform(error))
        case _:
            return result


def map_ok(result: Result[T, E], transform: Callable[[T], U]) -> Result[U, E]:
    """Transform the value of an `Ok`, passing an `Err` through untouched."""
    match result:
        case Ok(value=value):
            return Ok(value=transform(value))
        case _:
            return result
