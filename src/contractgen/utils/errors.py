"""Typed exceptions raised while synthesizing fixture instances."""

from __future__ import annotations

from typing import Any


class GenerationError(Exception):
    """Base class for generation related errors."""


class ArgumentError(GenerationError, ValueError):
    """Raised when a generator is constructed from invalid input."""


class UnsupportedTypeError(GenerationError, TypeError):
    """Raised when no production rule applies to a requested type."""

    def __init__(self, target: Any, reason: str | None = None) -> None:
        self.target = target
        self.reason = reason
        message = f"Unsupported type: {_type_name(target)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PropertyAssignmentError(GenerationError):
    """Raised when a single property could not be synthesized or assigned.

    The underlying failure is available as ``__cause__``.
    """

    def __init__(self, owner: type, property_name: str, cause: BaseException) -> None:
        self.owner = owner
        self.property_name = property_name
        super().__init__(
            f"Failed to assign '{property_name}' on {_type_name(owner)}: "
            f"{type(cause).__name__}: {cause}"
        )
        self.__cause__ = cause


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)


__all__ = [
    "GenerationError",
    "ArgumentError",
    "UnsupportedTypeError",
    "PropertyAssignmentError",
]
