"""
Configuration for the convenient-streams library.
"""

from typing import Final

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "CONVENIENT_STREAMS_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "CONVENIENT_STREAMS_BEARTYPE_ALL"

# --- Failure Classification ---
# Exceptions that signal a bug in the wrapped operation rather than a data
# condition. They escape a wrapped call untouched unless explicitly declared.
PROGRAMMING_ERRORS: Final[tuple[type[Exception], ...]] = (
    AssertionError,
    AttributeError,
    IndexError,
    NameError,
    NotImplementedError,
    RecursionError,
    TypeError,
)

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "PROGRAMMING_ERRORS",
]
