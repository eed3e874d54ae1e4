"""
Type definitions for negation.

Provides the validation mode, the options model and type aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Union

from pydantic import BaseModel, ConfigDict


class ValidationMode(str, Enum):
    """Execution policy for a validation call."""

    THROW = "throw"  # Raise the first violation
    COLLECT = "collect"  # Run everything, return all violations


class ValidationOptions(BaseModel):
    """
    Options accepted by the validation drivers.

    Usage:
        ValidationOptions(mode="collect").mode  # ValidationMode.COLLECT
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: ValidationMode = ValidationMode.THROW


# Type aliases
Path = tuple[str, ...]
CheckFn = Callable[[Any, Path], Union[None, Awaitable[None]]]
