"""
Result type for explicit error handling.

Every stage of the request pipeline returns a ``Result[T, E]`` instead of
raising, so failures travel as values from the storage fetch all the way to
the error policy that turns them into a response.

Usage:
    >>> def first_segment(path: str) -> Result[str, str]:
    ...     if not path:
    ...         return Failure("empty path")
    ...     return Success(path.split("/")[0])
    ...
    >>> match first_segment("docs/index.html"):
    ...     case Success(segment):
    ...         print(segment)
    ...     case Failure(error):
    ...         print(f"Error: {error}")
    docs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value of type T."""

    value: T

    def is_success(self) -> bool:
        """Check if this result is a success."""
        return True

    def is_failure(self) -> bool:
        """Check if this result is a failure."""
        return False

    def unwrap(self) -> T:
        """Unwrap the success value. Safe to call on Success."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the success value, or default if failure."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map the success value through function f."""
        return Success(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: chain operations that return Result."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error of type E."""

    error: E

    def is_success(self) -> bool:
        """Check if this result is a success."""
        return False

    def is_failure(self) -> bool:
        """Check if this result is a failure."""
        return True

    def unwrap(self) -> NoReturn:
        """
        Unwrap the success value.

        Raises:
            RuntimeError: Always, since Failure has no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Return default value since this is a failure."""
        return default

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map the success value through function f. No-op on Failure."""
        result: Result[U, E] = Failure(self.error)
        return result

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind. No-op on Failure."""
        result: Result[U, E] = Failure(self.error)
        return result


# Type alias for the union of Success and Failure
Result = Success[T] | Failure[E]
