"""Outcome values for settled awaitables.

Two shapes describe the same settlement:

- ``Ok`` / ``Err``: a tagged variant, unambiguous even when the success
  value is ``None``.
- ``ResultTuple``: the ``(value, error)`` pair where exactly one slot carries
  data and the other is ``None``. A success whose value is ``None`` reads as
  ``(None, None)``; the error slot is the authoritative signal.
"""

from __future__ import annotations

import dataclasses
import typing

from until.errors import UnwrapError

T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(typing.Generic[T]):
    """The awaitable settled successfully."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> typing.NoReturn:
        raise UnwrapError(
            f"unwrap_err() called on Ok({type(self.value).__name__})",
            hint="Check is_err before reading the error.",
        )

    def as_tuple(self) -> tuple[T, None]:
        return (self.value, None)


@dataclasses.dataclass(frozen=True, slots=True)
class Err:
    """The awaitable settled with an exception."""

    error: Exception

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> typing.NoReturn:
        """Re-raise the captured exception unchanged."""
        raise self.error

    def unwrap_err(self) -> Exception:
        return self.error

    def as_tuple(self) -> tuple[None, Exception]:
        return (None, self.error)


Outcome = Ok[T] | Err
ResultTuple = tuple[T, None] | tuple[None, Exception]
