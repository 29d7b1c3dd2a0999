"""Result monad for explicit error handling.

Persistence and configuration code returns ``Ok``/``Err`` instead of raising
for failures that are part of normal operation (a project file that cannot
be read, a client that was not supplied, ...). Callers branch on the result
type and decide how to surface the error.

Example usage:
    >>> def parse_hours(text: str) -> Result[float, str]:
    ...     try:
    ...         return Ok(float(text))
    ...     except ValueError:
    ...         return Err(f"Not a number: {text!r}")
    ...
    >>> result = parse_hours("7.5")
    >>> if is_ok(result):
    ...     print(f"Tracked {result.value}h")
    Tracked 7.5h
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: Description of what went wrong.
    """

    error: E


# TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if ``result`` is an Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if ``result`` is an Err."""
    return isinstance(result, Err)


def map_result(result: Ok[T] | Err[E], fn: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Transform the value of an Ok result, passing Err through untouched.

    Args:
        result: The result to transform.
        fn: Function applied to the Ok value.

    Returns:
        Ok with the transformed value, or the original Err.
    """
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain an operation that itself returns a Result.

    Args:
        result: The result to chain from.
        fn: Function taking the Ok value and returning a new Result.

    Returns:
        The Result produced by ``fn``, or the original Err.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Return the Ok value, or ``default`` for an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
