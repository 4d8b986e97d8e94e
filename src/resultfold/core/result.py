"""
Outcome type for fallible work.

An outcome is either ``Ok(value)`` or ``Err(error)``. Outcomes are
immutable once built, and the folds in :mod:`resultfold.core.fold`
only ever read them.

Usage:
    >>> outcome = try_except(int, "42")
    >>> if outcome.is_ok():
    ...     value = outcome.unwrap()

    >>> match outcome:
    ...     case Ok(value):
    ...         print(f"parsed {value}")
    ...     case Err(error):
    ...         print(f"rejected: {error}")
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union, Any

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Failure type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success branch of an outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        """Raises ValueError, an Ok carries no failure."""
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure branch of an outcome."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raises ValueError carrying the failure."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def try_except(fn: Callable[..., T], *args, **kwargs) -> Result[T, str]:
    """
    Runs one unit of fallible work and captures its outcome.

    Args:
        fn: Function to call
        *args: Positional arguments for fn
        **kwargs: Keyword arguments for fn

    Returns:
        Ok(return value), or Err("<ExceptionType>: <message>") if fn raised
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as e:
        return Err(f"{type(e).__name__}: {e}")
