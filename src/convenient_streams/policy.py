"""
Failure classification policy for wrapped operations.
"""

from pydantic import BaseModel, ConfigDict, Field

from . import config


class WrapPolicy(BaseModel):
    """
    Decides which uncaptured exceptions escape a wrapped call untouched.

    Exceptions listed in ``programming_errors`` are re-raised as-is; any other
    exception that does not match the declared kind becomes a
    `ContractViolationError`.
    """
    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        validate_default=True,
    )

    programming_errors: tuple[type[Exception], ...] = Field(
        default=config.PROGRAMMING_ERRORS,
        description="Exception classes treated as bugs in the wrapped operation",
    )

    def is_programming_error(self, exception: Exception) -> bool:
        return isinstance(exception, self.programming_errors)


DEFAULT_POLICY = WrapPolicy()

__all__ = ["DEFAULT_POLICY", "WrapPolicy"]
