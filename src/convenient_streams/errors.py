"""Exception hierarchy for convenient-streams."""

from __future__ import annotations


class ConvenientStreamsError(Exception):
    """Base exception for all convenient-streams errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidStateError(ConvenientStreamsError):
    """A `Try` was queried for the variant it does not hold.

    Check `is_success()` / `is_failure()` before calling the accessors.
    """


class ContractViolationError(ConvenientStreamsError):
    """A wrapped operation raised an exception outside its declared kind.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, actual_kind: str, declared_kind: str) -> None:
        super().__init__(
            f"Caught exception of type '{actual_kind}' instead of '{declared_kind}'",
            hint="Pass the exception kind the operation actually raises to wrap().",
        )
        self.actual_kind = actual_kind
        self.declared_kind = declared_kind


class BatchFailureError(ConvenientStreamsError):
    """A batch aggregation hit a failed `Try`.

    The captured failure is stored on ``failure`` and chained as ``__cause__``.
    """

    def __init__(self, failure: Exception) -> None:
        super().__init__(f"Batch contains a failure: {failure!r}")
        self.failure = failure


__all__ = [
    "BatchFailureError",
    "ContractViolationError",
    "ConvenientStreamsError",
    "InvalidStateError",
]
