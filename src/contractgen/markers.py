"""Annotation markers requesting a specific generated shape.

Python has a single ``int``, a single ``float`` and no character, pair or
rectangular array type.  The markers below fill those gaps so that fixture
types can state what they expect:

- ``Int8`` ... ``UInt64``, ``Float32``/``Float64`` and ``Char`` are
  :class:`typing.NewType` aliases; at runtime the values are plain ``int``,
  ``float`` and one-character ``str``.
- ``ZonedDateTime`` asks for a timezone-aware :class:`datetime.datetime`.
- ``KeyValuePair[K, V]`` is a generic named tuple.
- ``Array[T]`` / ``Array[T, R]`` describes a rank ``R`` rectangular array
  generated as nested lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, NamedTuple, NewType, TypeVar

K = TypeVar("K")
V = TypeVar("V")

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
UInt8 = NewType("UInt8", int)
UInt16 = NewType("UInt16", int)
UInt32 = NewType("UInt32", int)
UInt64 = NewType("UInt64", int)

Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

Char = NewType("Char", str)

ZonedDateTime = NewType("ZonedDateTime", datetime)


class KeyValuePair(NamedTuple, Generic[K, V]):
    """An immutable key/value pair."""

    key: K
    value: V


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Parameterized array annotation produced by ``Array[...]``."""

    element: Any
    rank: int = 1

    def __post_init__(self) -> None:
        if self.rank < 1:
            raise ValueError("array rank must be at least 1")

    def __repr__(self) -> str:
        if self.rank == 1:
            return f"Array[{_name(self.element)}]"
        return f"Array[{_name(self.element)}, {self.rank}]"


class Array:
    """Subscriptable marker: ``Array[int]`` or ``Array[str, 2]``."""

    def __new__(cls, *args: Any, **kwargs: Any) -> "Array":
        raise TypeError("Array is an annotation marker; subscript it instead")

    def __class_getitem__(cls, params: Any) -> ArrayType:
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == 1:
            return ArrayType(params[0])
        if len(params) == 2 and isinstance(params[1], int):
            return ArrayType(params[0], params[1])
        raise TypeError("Array expects Array[T] or Array[T, rank]")


def _name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


__all__ = [
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
    "Char",
    "ZonedDateTime",
    "KeyValuePair",
    "Array",
    "ArrayType",
]
