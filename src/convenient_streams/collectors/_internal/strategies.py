import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from ...errors import BatchFailureError
from ...functional_types import Try
from .protocol import BasicCollector

logger = logging.getLogger(__name__)


def _merge_failures[E](left: dict[int, E], right: dict[int, E]) -> dict[int, E]:
    left.update(right)
    return left


def _merge_lists[T](left: list[T], right: list[T]) -> list[T]:
    left.extend(right)
    return left


# Keyed by id() so unhashable exceptions are accepted.
def _record_failure[P, E: Exception](failures: dict[int, E], trying: Try[P, E]) -> None:
    if trying.is_failure():
        failure = trying.get_failure()
        failures[id(failure)] = failure


def _distinct_failures[P, E: Exception, R](
    finisher: Callable[[dict[int, E]], R],
) -> BasicCollector[Try[P, E], dict[int, E], R]:
    return BasicCollector(
        supplier=dict,
        accumulator=_record_failure,
        combiner=_merge_failures,
        finisher=finisher,
    )


def all_succeeded[P, E: Exception]() -> BasicCollector[Try[P, E], dict[int, E], bool]:
    """Collector that returns True if no exception was captured in any `Try`."""
    return _distinct_failures(lambda failures: not failures)


def any_failed[P, E: Exception]() -> BasicCollector[Try[P, E], dict[int, E], bool]:
    """Collector that returns True if an exception was captured in any `Try`."""
    return _distinct_failures(lambda failures: bool(failures))


def _collect_list[P, E: Exception, R](
    accumulator: Callable[[list[Try[P, E]], Try[P, E]], None],
    extract: Callable[[Try[P, E]], R],
) -> BasicCollector[Try[P, E], list[Try[P, E]], Iterator[R]]:
    return BasicCollector(
        supplier=list,
        accumulator=accumulator,
        combiner=_merge_lists,
        finisher=lambda tries: map(extract, tries),
    )


def collect_successes[P, E: Exception]() -> BasicCollector[
    Try[P, E], list[Try[P, E]], Iterator[P]
]:
    """Collector yielding the values of all successful calls; failures are dropped."""

    def keep_success(tries: list[Try[P, E]], trying: Try[P, E]) -> None:
        if trying.is_success():
            tries.append(trying)

    return _collect_list(keep_success, Try.get_value)


def collect_or_fail[P, E: Exception]() -> BasicCollector[
    Try[P, E], list[Try[P, E]], Iterator[P]
]:
    """
    Collector that assumes every call succeeded and yields the values.

    Raises:
        BatchFailureError: As soon as a failed `Try` is accumulated. Which
            failure is reported is unspecified when several exist.
    """

    def keep_or_raise(tries: list[Try[P, E]], trying: Try[P, E]) -> None:
        if trying.is_success():
            tries.append(trying)
            return
        failure = trying.get_failure()
        logger.debug(f"Aborting collection on failure: {failure!r}")
        raise BatchFailureError(failure) from failure

    return _collect_list(keep_or_raise, Try.get_value)


@dataclass
class _Truncated[P, E: Exception]:
    """Successes of one accumulation branch, and whether it saw a failure."""

    tries: list[Try[P, E]] = field(default_factory=list)
    failed: bool = False


def _keep_until_failure[P, E: Exception](branch: _Truncated[P, E], trying: Try[P, E]) -> None:
    if branch.failed:
        return
    if trying.is_failure():
        branch.failed = True
        return
    branch.tries.append(trying)


def _merge_truncated[P, E: Exception](
    left: _Truncated[P, E], right: _Truncated[P, E]
) -> _Truncated[P, E]:
    if left.failed:
        return left
    left.tries.extend(right.tries)
    left.failed = right.failed
    return left


def collect_until_first_failure[P, E: Exception]() -> BasicCollector[
    Try[P, E], _Truncated[P, E], Iterator[P]
]:
    """
    Collector yielding the values of all calls up until the first captured exception.

    Sequentially this is the prefix of successes before the first failure. When
    partial results are merged, a branch that saw a failure discards every
    branch merged after it, so the result is only a strict prefix of the
    original order if the partitions were contiguous and merged in order.
    """
    return BasicCollector(
        supplier=_Truncated,
        accumulator=_keep_until_failure,
        combiner=_merge_truncated,
        finisher=lambda branch: map(Try.get_value, branch.tries),
    )


def collect_failures[P, E: Exception]() -> BasicCollector[
    Try[P, E], list[Try[P, E]], Iterator[E]
]:
    """Collector yielding the captured exceptions; successes are dropped."""

    def keep_failure(tries: list[Try[P, E]], trying: Try[P, E]) -> None:
        if trying.is_failure():
            tries.append(trying)

    return _collect_list(keep_failure, Try.get_failure)


__all__ = [
    "all_succeeded",
    "any_failed",
    "collect_failures",
    "collect_or_fail",
    "collect_successes",
    "collect_until_first_failure",
]
