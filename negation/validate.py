"""
Synchronous validation drivers.

Provides validate_value() and validate_object().
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterator, Mapping, Sequence, TypeVar

from .context import resolve_mode
from .core import Constraint, run_check, to_constraint
from .errors import NegationError
from .types import Path, ValidationMode

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

Schema = Mapping[str, Sequence[Any] | None]

_MISSING = object()


def validate_value(
    value: _T,
    constraints: Sequence[Any],
    mode: ValidationMode | str | None = None,
) -> _T | tuple[NegationError, ...]:
    """
    Validate a single value against an ordered list of constraints.

    Args:
        value: The value to validate (never modified)
        constraints: Check, NamedCheck or plain check functions
        mode: "throw" (default) or "collect"; None uses validation_context()

    Returns:
        throw: the value itself if every constraint passes
        collect: tuple of violations, empty if every constraint passes

    Raises:
        NegationError: In throw mode, the first violation
        TypeError: If a constraint is async (use validate_value_async)

    Usage:
        validate_value("hello", [not_null, not_empty])            # "hello"
        validate_value("", [not_empty], mode="collect")  # (NegationError(...),)
    """
    resolved = resolve_mode(mode)
    errors = _run_constraints(value, constraints, (), resolved)
    return tuple(errors) if resolved is ValidationMode.COLLECT else value


def validate_object(
    obj: _T,
    schema: Schema,
    mode: ValidationMode | str | None = None,
) -> _T | tuple[NegationError, ...]:
    """
    Validate the fields of a flat object against a schema.

    Args:
        obj: A mapping, or any object exposing fields as attributes
             (dataclass, pydantic model). Missing fields read as None.
        schema: Field name -> ordered constraints. Fields are checked in
                the schema's iteration order; fields not in the schema are
                ignored.
        mode: "throw" (default) or "collect"; None uses validation_context()

    Returns:
        throw: the object itself if every field passes
        collect: tuple of violations ordered by field, then constraint

    Raises:
        NegationError: In throw mode, the first violation; its path is (field,)
        TypeError: If a constraint is async (use validate_object_async)

    Usage:
        validate_object({"id": -1, "name": ""}, {
            "id": [not_negative],
            "name": [not_empty],
        }, mode="collect")
        # -> violations at ("id",) then ("name",)
    """
    resolved = resolve_mode(mode)
    errors: list[NegationError] = []
    for field, value, constraints in iter_fields(obj, schema):
        errors.extend(_run_constraints(value, constraints, (field,), resolved))
    return tuple(errors) if resolved is ValidationMode.COLLECT else obj


def iter_fields(obj: Any, schema: Schema) -> Iterator[tuple[str, Any, Sequence[Any]]]:
    """Yield (field, value, constraints) in schema order."""
    for field, constraints in schema.items():
        yield field, get_field(obj, field), constraints or ()


def get_field(obj: Any, field: str) -> Any:
    """
    Read a field from a mapping or an attribute-style object.

    Missing fields read as None. Errors raised while computing a field that
    does exist (e.g. inside a property) propagate.
    """
    if isinstance(obj, Mapping):
        return obj.get(field)
    if inspect.getattr_static(obj, field, _MISSING) is _MISSING:
        # Dynamic attributes only exist through __getattr__
        if hasattr(type(obj), "__getattr__"):
            return getattr(obj, field, None)
        return None
    return getattr(obj, field)


def record(
    error: NegationError, errors: list[NegationError], mode: ValidationMode
) -> None:
    """Raise the violation in throw mode, otherwise append it to `errors`."""
    if mode is ValidationMode.THROW:
        logger.debug("Violation at %r: %s", error.path, error.constraint)
        raise error
    logger.debug("Collected violation at %r: %s", error.path, error.constraint)
    errors.append(error)


def _run_constraints(
    value: Any, constraints: Sequence[Any], path: Path, mode: ValidationMode
) -> list[NegationError]:
    errors: list[NegationError] = []
    for item in constraints:
        constraint = to_constraint(item)
        if constraint.is_async:
            raise TypeError(
                f"Constraint {constraint.identifier!r} is async; "
                "use validate_value_async / validate_object_async"
            )
        try:
            _ensure_sync(constraint, run_check(constraint, value, path))
        except NegationError as error:
            record(error, errors, mode)
    return errors


def _ensure_sync(constraint: Constraint, result: Any) -> None:
    """Reject a check that returned an awaitable despite being declared sync."""
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise TypeError(
            f"Constraint {constraint.identifier!r} returned an awaitable; "
            "use validate_value_async / validate_object_async"
        )
