"""Typed Result container for explicit success/failure returns.

Reading input is the only step of an analysis that can fail, and an
unavailable input must never surface as an exception to the caller. The
file provider therefore returns a `Result[str, str]`: `Ok(text)` when the
file could be read, `Err(reason)` otherwise. The session inspects the
variant and degrades to an unmodified state on `Err`.

Example
-------
>>> from textfathom.core.result import ok, err, Result
>>> def non_empty(x: str) -> Result[str, str]:
...     return ok(x) if x else err("empty input")
>>> non_empty("two words").unwrap()
'two words'
>>> non_empty("").unwrap_err()
'empty input'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """`Ok[T]` on success, `Err[E]` on failure."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the success value; raise ``RuntimeError`` on ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise RuntimeError(f"unwrap() called on {self!r}")

    def unwrap_err(self) -> E:
        """Return the failure reason; raise ``RuntimeError`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"unwrap_err() called on {self!r}")


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E


def ok(value: T) -> Result[T, E]:
    """Wrap ``value`` as a success typed as the `Result` base."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Wrap ``error`` as a failure typed as the `Result` base."""
    return Err(error)


__all__ = ["Result", "Ok", "Err", "ok", "err"]
