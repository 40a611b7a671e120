"""Exception hierarchy for until.

Failures of the awaited work are never raised by the adapters; they are
returned as data. These exceptions only signal misuse of the package itself.
"""

from __future__ import annotations


class UntilError(Exception):
    """Base exception for all until errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class NotAwaitableError(UntilError, TypeError):
    """The adapter was handed something it cannot await."""


class UnwrapError(UntilError, ValueError):
    """An outcome was unwrapped on the wrong side."""


class ConfigurationError(UntilError, ValueError):
    """Configuration validation or resolution failed."""
