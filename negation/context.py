"""
Context manager for validation configuration (e.g., the default mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

from .types import ValidationMode, ValidationOptions

# Context variable for the default validation mode
_default_mode: ContextVar[ValidationMode] = ContextVar(
    "default_mode", default=ValidationMode.THROW
)


def current_mode() -> ValidationMode:
    """Return the mode used when a call does not pass one explicitly."""
    return _default_mode.get()


def resolve_mode(mode: ValidationMode | str | None) -> ValidationMode:
    """Parse an explicit mode, falling back to the context default."""
    if mode is None:
        return current_mode()
    return ValidationOptions(mode=mode).mode


@contextmanager
def validation_context(*, mode: ValidationMode | str = ValidationMode.THROW):
    """
    Context manager for validation configuration.

    Args:
        mode: Default mode for calls made inside the block that do not pass
              `mode` themselves. Either "throw" or "collect".

    Example:
        from negation import not_empty, validate_value, validation_context

        with validation_context(mode="collect"):
            errors = validate_value("", [not_empty])  # no raise

        # Outside the block the default is "throw" again
        validate_value("", [not_empty])  # NegationError!
    """
    token = _default_mode.set(ValidationOptions(mode=mode).mode)
    try:
        yield
    finally:
        _default_mode.reset(token)
