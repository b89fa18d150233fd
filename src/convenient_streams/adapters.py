"""
Adapters that turn fallible callables into total callables returning `Try`.
"""

import functools
import logging
from collections.abc import Callable

from .errors import ContractViolationError
from .functional_types import Try
from .policy import DEFAULT_POLICY, WrapPolicy

logger = logging.getLogger(__name__)

type FailureKind[E: Exception] = type[E] | tuple[type[E], ...] | Callable[[Exception], bool]


def kind_name(kind: object) -> str:
    """Human-readable name of an exception class, class tuple or predicate."""
    if isinstance(kind, tuple):
        return " | ".join(kind_name(member) for member in kind)
    if isinstance(kind, type):
        if kind.__module__ == "builtins":
            return kind.__qualname__
        return f"{kind.__module__}.{kind.__qualname__}"
    return getattr(kind, "__name__", repr(kind))


def _as_predicate(kind: FailureKind) -> Callable[[Exception], bool]:
    if isinstance(kind, type | tuple):
        return lambda exception: isinstance(exception, kind)
    return kind


def wrap[P, R, E: Exception](
    operation: Callable[[P], R],
    declared_kind: FailureKind[E],
    *,
    policy: WrapPolicy = DEFAULT_POLICY,
) -> Callable[[P], Try[R, E]]:
    """
    Wraps ``operation`` so that exceptions of ``declared_kind`` are captured.

    Args:
        operation: A unary callable that may raise.
        declared_kind: The expected failure: an exception class, a tuple of
            classes, or a predicate classifying an exception.
        policy: Decides which other exceptions escape unchanged.

    Returns:
        A callable returning `Try.of_value` on success and `Try.of_failure`
        when the raised exception matches ``declared_kind``. Programming
        errors are re-raised unchanged; anything else is re-raised as a
        `ContractViolationError` chained from the original.
    """
    matches = _as_predicate(declared_kind)
    declared_name = kind_name(declared_kind)

    @functools.wraps(operation)
    def wrapped(parameter: P) -> Try[R, E]:
        try:
            result = operation(parameter)
        except Exception as exception:
            if matches(exception):
                logger.debug(f"Captured {kind_name(type(exception))} from {operation!r}: {exception}")
                return Try.of_failure(exception)
            if policy.is_programming_error(exception):
                raise
            actual_name = kind_name(type(exception))
            logger.warning(
                f"{operation!r} raised '{actual_name}' but was declared to raise '{declared_name}'"
            )
            raise ContractViolationError(actual_name, declared_name) from exception
        return Try.of_value(result)

    return wrapped


def wrap_catch_all[P, R](operation: Callable[[P], R]) -> Callable[[P], Try[R, Exception]]:
    """Wraps ``operation`` so that every `Exception` it raises is captured."""

    @functools.wraps(operation)
    def wrapped(parameter: P) -> Try[R, Exception]:
        try:
            return Try.of_value(operation(parameter))
        except Exception as exception:
            logger.debug(f"Captured {kind_name(type(exception))} from {operation!r}: {exception}")
            return Try.of_failure(exception)

    return wrapped


__all__ = ["FailureKind", "kind_name", "wrap", "wrap_catch_all"]
