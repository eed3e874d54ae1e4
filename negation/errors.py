"""
The violation record raised or collected by the validation drivers.
"""

from __future__ import annotations

from typing import Any, Iterable


class NegationError(Exception):
    """
    A single failed constraint.

    Carries the path of the offending field (empty for single values), a
    human-readable message and the identifier of the constraint that failed.
    Instances are immutable once created.
    """

    __slots__ = ("path", "message", "constraint")

    def __init__(self, path: Iterable[str], message: str, constraint: str):
        super().__init__(message)
        object.__setattr__(self, "path", tuple(path))
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "constraint", constraint)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in NegationError.__slots__:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in NegationError.__slots__:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__delattr__(name)

    @property
    def dotted_path(self) -> str:
        """Path joined with dots, e.g. "name"; empty for single values."""
        return ".".join(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "message": self.message,
            "constraint": self.constraint,
        }

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NegationError):
            return (self.path, self.message, self.constraint) == (
                other.path,
                other.message,
                other.constraint,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.path, self.message, self.constraint))

    def __reduce__(self):
        return (type(self), (self.path, self.message, self.constraint))

    def __repr__(self) -> str:
        return (
            f"NegationError(path={self.path!r}, message={self.message!r}, "
            f"constraint={self.constraint!r})"
        )
