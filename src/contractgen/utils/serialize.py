"""Conversion of generated object graphs into JSON-compatible primitives.

Used by the command line interface to print fixtures.  The rendition is one
way: it is meant for inspection and snapshotting, not for reconstructing the
original objects.
"""

from __future__ import annotations

import base64
import dataclasses
import datetime as dt
import uuid
from collections.abc import Mapping, Set
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

Primitive = None | bool | int | float | str | list["Primitive"] | dict[str, "Primitive"]


def _key(value: Any) -> str:
    rendered = to_primitive(value)
    return rendered if isinstance(rendered, str) else repr(rendered)


def _public_attrs(value: Any) -> dict[str, Any]:
    return {k: v for k, v in vars(value).items() if not k.startswith("_")}


def to_primitive(value: Any) -> Primitive:
    """Return ``value`` rendered with JSON types only.

    - dataclasses, pydantic models and plain objects become dictionaries of
      their public attributes
    - named tuples become dictionaries, other tuples, sets and sequences lists
    - date/time values use ISO 8601, durations total seconds
    - decimals and UUIDs become strings, bytes base64
    - enumeration members are replaced by their value
    - mapping keys are rendered then stringified
    """

    if isinstance(value, Enum):
        return to_primitive(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, dt.timedelta):
        return value.total_seconds()
    if isinstance(value, (Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, BaseModel):
        return {name: to_primitive(getattr(value, name)) for name in type(value).model_fields}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_primitive(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return {k: to_primitive(v) for k, v in value._asdict().items()}
    if isinstance(value, Mapping):
        return {_key(k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, Set):
        return sorted((to_primitive(v) for v in value), key=repr)
    if isinstance(value, (list, tuple)):
        return [to_primitive(v) for v in value]
    if hasattr(value, "__dict__"):
        return {k: to_primitive(v) for k, v in _public_attrs(value).items()}
    return repr(value)


__all__ = ["Primitive", "to_primitive"]
