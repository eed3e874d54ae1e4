"""
Built-in constraints for negation.

Each constraint fails when its negative condition holds. Parameterized
constraints are factory functions that return a fresh NamedCheck.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable

from .core import NamedCheck, must_not

not_null = must_not(
    lambda x: x is None,
    "Value must not be null or undefined",
    "notNull",
)

not_empty = must_not(
    lambda x: x.strip() == "",
    "String must not be empty",
    "notEmpty",
)

not_negative = must_not(
    lambda x: x < 0,
    "Number must not be negative",
    "notNegative",
)


def not_longer_than(max_length: int) -> NamedCheck:
    """Fail when the string has more than `max_length` characters."""
    return must_not(
        lambda x: len(x) > max_length,
        f"String must not be longer than {max_length} characters",
        "notLongerThan",
    )


def not_shorter_than(min_length: int) -> NamedCheck:
    """Fail when the string has fewer than `min_length` characters."""
    return must_not(
        lambda x: len(x) < min_length,
        f"String must not be shorter than {min_length} characters",
        "notShorterThan",
    )


def not_greater_than(max_value: Any) -> NamedCheck:
    """Fail when the number is greater than `max_value`."""
    return must_not(
        lambda x: x > max_value,
        f"Number must not be greater than {max_value}",
        "notGreaterThan",
    )


def not_less_than(min_value: Any) -> NamedCheck:
    """Fail when the number is less than `min_value`."""
    return must_not(
        lambda x: x < min_value,
        f"Number must not be less than {min_value}",
        "notLessThan",
    )


def not_duplicate(
    exists: Callable[[Any], Awaitable[bool]] | Callable[[Any], bool],
) -> NamedCheck:
    """
    Fail when `exists(value)` reports the value as already taken.

    `exists` is usually an async lookup (database, API). Plain functions are
    accepted too; the constraint itself is always async.

    Usage:
        async def username_taken(name: str) -> bool: ...

        await validate_value_async("admin", [not_empty, not_duplicate(username_taken)])
    """

    async def is_duplicate(value: Any) -> bool:
        result = exists(value)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    return must_not(is_duplicate, "Value must not be a duplicate", "notDuplicate")
