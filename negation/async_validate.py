"""
Asynchronous validation drivers.

Constraint lists may mix sync and async checks. Every check is normalized
to "a call that resolves or raises, eventually": its return value is
awaited when it is awaitable.

Ordering policy:
    validate_value_async   sequential in both modes
    validate_object_async  sequential in throw mode; in collect mode every
                           check runs concurrently and results are reported
                           by field, then constraint order

In-flight checks are never cancelled and no timeout is applied; wrap slow
checks in asyncio.wait_for() if they need one.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Sequence, TypeVar

from .context import resolve_mode
from .core import Constraint, run_check, to_constraint
from .errors import NegationError
from .types import Path, ValidationMode
from .validate import Schema, iter_fields, record

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


async def validate_value_async(
    value: _T,
    constraints: Sequence[Any],
    mode: ValidationMode | str | None = None,
) -> _T | tuple[NegationError, ...]:
    """
    Validate a single value against sync and async constraints.

    Constraints run one after another in list order, each finishing before
    the next starts, so violations are discovered in the same order as
    validate_value().

    Returns:
        throw: the value itself if every constraint passes
        collect: tuple of violations, empty if every constraint passes

    Raises:
        NegationError: In throw mode, the first violation
    """
    resolved = resolve_mode(mode)
    errors = await _run_sequential(value, constraints, (), resolved)
    return tuple(errors) if resolved is ValidationMode.COLLECT else value


async def validate_object_async(
    obj: _T,
    schema: Schema,
    mode: ValidationMode | str | None = None,
) -> _T | tuple[NegationError, ...]:
    """
    Validate the fields of a flat object against sync and async constraints.

    In throw mode fields and constraints are checked sequentially, so the
    first violation is raised before any later check has started.

    In collect mode every check of every field is started at once and the
    call returns after all of them have settled. Violations are ordered by
    field, then constraint, regardless of which check finished first. If a
    check fails with anything other than NegationError, the first such
    error (in that same order) is raised once all checks have settled.

    Returns:
        throw: the object itself if every field passes
        collect: tuple of violations ordered by field, then constraint

    Raises:
        NegationError: In throw mode, the first violation; its path is (field,)
        Exception: Any other error raised by a check. In throw mode it
                   propagates at once; in collect mode the first one in
                   declaration order is raised after every check settles.
    """
    resolved = resolve_mode(mode)

    if resolved is ValidationMode.THROW:
        for field, value, constraints in iter_fields(obj, schema):
            await _run_sequential(value, constraints, (field,), resolved)
        return obj

    checks = [
        (to_constraint(item), value, (field,))
        for field, value, constraints in iter_fields(obj, schema)
        for item in constraints
    ]
    logger.debug("Running %d checks concurrently", len(checks))
    outcomes = await asyncio.gather(
        *(_settle(*check) for check in checks), return_exceptions=True
    )

    errors: list[NegationError] = []
    for outcome in outcomes:
        if isinstance(outcome, NegationError):
            record(outcome, errors, resolved)
        elif isinstance(outcome, BaseException):
            raise outcome
    return tuple(errors)


async def _run_sequential(
    value: Any, constraints: Sequence[Any], path: Path, mode: ValidationMode
) -> list[NegationError]:
    errors: list[NegationError] = []
    for item in constraints:
        try:
            await _settle(to_constraint(item), value, path)
        except NegationError as error:
            record(error, errors, mode)
    return errors


async def _settle(constraint: Constraint, value: Any, path: Path) -> None:
    """Run one check to completion, awaiting its result if needed."""
    result = run_check(constraint, value, path)
    if inspect.isawaitable(result):
        await result
