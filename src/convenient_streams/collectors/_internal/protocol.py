from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, Protocol


class Collector[T, A, R](Protocol):
    """Protocol for all collectors.

    A collector reduces an iterable of ``T`` in four steps: create an empty
    accumulator, fold each element into it, merge partial accumulators, and
    finish the accumulator into the result ``R``.
    """

    def supplier(self) -> A:
        """Create an empty accumulator."""
        ...

    def accumulator(self, acc: A, item: T) -> None:
        """Fold one element into the accumulator in place."""
        ...

    def combiner(self, left: A, right: A) -> A:
        """Merge two partial accumulators."""
        ...

    def finisher(self, acc: A) -> R:
        """Turn the accumulator into the final result."""
        ...


class BasicCollector[T, A, R]:
    """Collector assembled from four plain callables."""

    def __init__(
        self,
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], None],
        combiner: Callable[[A, A], A],
        finisher: Callable[[A], R],
    ):
        self._supplier = supplier
        self._accumulator = accumulator
        self._combiner = combiner
        self._finisher = finisher

    def supplier(self) -> A:
        return self._supplier()

    def accumulator(self, acc: A, item: T) -> None:
        self._accumulator(acc, item)

    def combiner(self, left: A, right: A) -> A:
        return self._combiner(left, right)

    def finisher(self, acc: A) -> R:
        return self._finisher(acc)


def _accumulate[T, A](items: Iterable[T], collector: Collector[T, A, Any]) -> A:
    acc = collector.supplier()
    for item in items:
        collector.accumulator(acc, item)
    return acc


def collect[T, R](items: Iterable[T], collector: Collector[T, Any, R]) -> R:
    """Universal collect function that works with any collector."""
    return collector.finisher(_accumulate(items, collector))


def collect_partitioned[T, R](
    partitions: Iterable[Iterable[T]], collector: Collector[T, Any, R]
) -> R:
    """Reduce each partition separately, then merge the partial results in order.

    This is the path a parallel runtime takes: every partition gets its own
    accumulator and the partial accumulators are combined left to right.
    """
    partials = [_accumulate(partition, collector) for partition in partitions]
    if not partials:
        return collector.finisher(collector.supplier())
    return collector.finisher(reduce(collector.combiner, partials))


__all__ = ["BasicCollector", "Collector", "collect", "collect_partitioned"]
