import contextlib

from . import config

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package
    if os.environ.get(config.BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(config.BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from .adapters import FailureKind, kind_name, wrap, wrap_catch_all
from .collectors import (
    all_succeeded,
    any_failed,
    collect,
    collect_failures,
    collect_or_fail,
    collect_partitioned,
    collect_successes,
    collect_until_first_failure,
)
from .errors import (
    BatchFailureError,
    ContractViolationError,
    ConvenientStreamsError,
    InvalidStateError,
)
from .functional_types import Try
from .policy import DEFAULT_POLICY, WrapPolicy

__all__: list[str] = [
    "DEFAULT_POLICY",
    "BatchFailureError",
    "ContractViolationError",
    "ConvenientStreamsError",
    "FailureKind",
    "InvalidStateError",
    "Try",
    "WrapPolicy",
    "all_succeeded",
    "any_failed",
    "collect",
    "collect_failures",
    "collect_or_fail",
    "collect_partitioned",
    "collect_successes",
    "collect_until_first_failure",
    "kind_name",
    "wrap",
    "wrap_catch_all",
]
