"""
Defines the `Try` capture type used throughout convenient-streams.

A `Try` records the outcome of a single call to a fallible operation: either the
value it produced or the exception of the expected kind it raised. Internally it
wraps a `returns.result.Result`, so a `Try` always holds exactly one of the two
and can be handed to (or built from) code that already speaks `returns`.

Instances are normally produced by `convenient_streams.adapters.wrap` and
consumed by the collectors in `convenient_streams.collectors`.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from returns.result import Failure, Result, Success

from .errors import InvalidStateError

# R represents the type of the success value.
# E represents the type of the captured exception.
R = TypeVar("R")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Try(Generic[R, E]):
    """Immutable outcome of one invocation: a value or a captured exception."""

    outcome: Result[R, E]

    def __post_init__(self) -> None:
        match self.outcome:
            case Success():
                return
            case Failure() if isinstance(self.outcome.failure(), Exception):
                return
        raise TypeError(
            f"Try requires Success(value) or Failure(exception), got {self.outcome!r}"
        )

    @classmethod
    def of_value(cls, value: R) -> "Try[R, E]":
        """Creates a successful `Try` holding ``value``."""
        return cls(Success(value))

    @classmethod
    def of_failure(cls, failure: E) -> "Try[R, E]":
        """Creates a failed `Try` holding ``failure``."""
        return cls(Failure(failure))

    @classmethod
    def from_result(cls, result: Result[R, E]) -> "Try[R, E]":
        """Adopts an existing `returns` result."""
        return cls(result)

    def to_result(self) -> Result[R, E]:
        """Returns the underlying `returns` result."""
        return self.outcome

    def is_success(self) -> bool:
        return isinstance(self.outcome, Success)

    def is_failure(self) -> bool:
        return not self.is_success()

    def get_value(self) -> R:
        """
        Returns the held value.

        Raises:
            InvalidStateError: If this `Try` holds a failure.
        """
        if isinstance(self.outcome, Success):
            return self.outcome.unwrap()
        raise InvalidStateError(
            "Value can not be loaded when an exception occurred previously"
        ) from self.outcome.failure()

    def get_failure(self) -> E:
        """
        Returns the held exception.

        Raises:
            InvalidStateError: If this `Try` holds a value.
        """
        if isinstance(self.outcome, Failure):
            return self.outcome.failure()
        raise InvalidStateError("Exception can only be loaded when an exception occurred previously")


__all__ = ["Try"]
