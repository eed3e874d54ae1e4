"""
Core constraint classes for negation.

Provides the Check and NamedCheck dataclasses and the helpers that turn
plain callables and predicates into constraints.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from .errors import NegationError
from .types import CheckFn, Path


@dataclass(frozen=True, slots=True)
class Check:
    """
    Constraint made of a bare check function.

    The function receives the value and its path, and raises NegationError
    when the value is invalid. `is_async` declares whether calling it
    returns an awaitable.
    """

    fn: CheckFn
    is_async: bool = False

    @property
    def identifier(self) -> str:
        return getattr(self.fn, "__name__", type(self.fn).__name__)


@dataclass(frozen=True, slots=True)
class NamedCheck:
    """Constraint pairing a check function with an explicit identifier."""

    fn: CheckFn
    constraint: str
    is_async: bool = False

    @property
    def identifier(self) -> str:
        return self.constraint


Constraint = Union[Check, NamedCheck]


def to_constraint(c: Any) -> Constraint:
    """
    Coerce a value to a constraint.

    Conversion rules:
        Check | NamedCheck -> pass through
        Callable -> Check, async if declared with `async def`
    """
    if isinstance(c, (Check, NamedCheck)):
        return c

    if callable(c):
        return Check(fn=c, is_async=_is_async_callable(c))

    raise TypeError(f"Cannot convert {type(c).__name__} to constraint")


def run_check(constraint: Constraint, value: Any, path: Path) -> Any:
    """
    Invoke a constraint against a value.

    Returns whatever the check returns, which is an awaitable for async
    checks. NegationError and any other exception propagate to the caller.
    """
    match constraint:
        case NamedCheck(fn=fn):
            return fn(value, path)
        case Check(fn=fn):
            return fn(value, path)
    raise TypeError(f"Not a constraint: {constraint!r}")


def must_not(
    predicate: Callable[[Any], bool] | Callable[[Any], Awaitable[bool]],
    message: str,
    constraint: str,
) -> NamedCheck:
    """
    Build a constraint that fails when `predicate(value)` is truthy.

    An `async def` predicate produces an async constraint which awaits it.

    Usage:
        must_not(lambda x: x % 2, "Number must not be odd", "notOdd")
    """
    if _is_async_callable(predicate):

        async def check_async(value: Any, path: Path) -> None:
            if await predicate(value):
                raise NegationError(path, message, constraint)

        return NamedCheck(fn=check_async, constraint=constraint, is_async=True)

    def check(value: Any, path: Path) -> None:
        if predicate(value):
            raise NegationError(path, message, constraint)

    return NamedCheck(fn=check, constraint=constraint)


def _is_async_callable(fn: Any) -> bool:
    """Whether `fn` is declared as a coroutine function (no call is made)."""
    if inspect.iscoroutinefunction(fn):
        return True
    call = getattr(fn, "__call__", None)
    return call is not None and inspect.iscoroutinefunction(call)
