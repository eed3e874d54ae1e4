"""
Negation - validation by stating what a value must not be.

Usage:
    from negation import not_empty, not_negative, validate_object

    validate_object({"id": 1, "name": "Ada"}, {
        "id": [not_negative],
        "name": [not_empty],
    })

    errors = validate_object(data, schema, mode="collect")
"""

from .async_validate import validate_object_async, validate_value_async
from .constraints import (
    not_duplicate,
    not_empty,
    not_greater_than,
    not_less_than,
    not_longer_than,
    not_negative,
    not_null,
    not_shorter_than,
)
from .context import current_mode, validation_context
from .core import Check, Constraint, NamedCheck, must_not, to_constraint
from .errors import NegationError
from .types import Path, ValidationMode, ValidationOptions
from .validate import Schema, validate_object, validate_value

__all__ = [
    # Errors
    "NegationError",
    # Types
    "Path",
    "Schema",
    "ValidationMode",
    "ValidationOptions",
    # Core
    "Check",
    "NamedCheck",
    "Constraint",
    "to_constraint",
    "must_not",
    # Constraints
    "not_null",
    "not_empty",
    "not_negative",
    "not_longer_than",
    "not_shorter_than",
    "not_greater_than",
    "not_less_than",
    "not_duplicate",
    # Validation
    "validate_value",
    "validate_object",
    "validate_value_async",
    "validate_object_async",
    # Configuration
    "validation_context",
    "current_mode",
]
