"""
Aggregation strategies over iterables of `Try` values.

Each strategy builder returns a fresh collector that can be handed to
`collect` (sequential) or `collect_partitioned` (partial reductions merged
with the collector's combiner).
"""

from ._internal.protocol import BasicCollector, Collector, collect, collect_partitioned
from ._internal.strategies import (
    all_succeeded,
    any_failed,
    collect_failures,
    collect_or_fail,
    collect_successes,
    collect_until_first_failure,
)

__all__ = [
    "BasicCollector",
    "Collector",
    "all_succeeded",
    "any_failed",
    "collect",
    "collect_failures",
    "collect_or_fail",
    "collect_partitioned",
    "collect_successes",
    "collect_until_first_failure",
]
