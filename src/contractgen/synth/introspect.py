"""Runtime type introspection shared by the synthesis components.

Annotations are resolved with :func:`typing.get_type_hints` class by class
along the MRO so that a single unresolvable forward reference only hides the
attribute it belongs to.  Pydantic models are read from ``model_fields``.
"""

from __future__ import annotations

import inspect
import sys
import types
from typing import Annotated, Any, ClassVar, Final, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

NoneType = type(None)

_RESOLUTION_ERRORS = (NameError, SyntaxError, TypeError, AttributeError)


def strip_annotated(tp: Any) -> Any:
    """Return ``X`` for ``Annotated[X, ...]`` (recursively), else ``tp``."""

    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def is_union(tp: Any) -> bool:
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def is_optional(tp: Any) -> bool:
    """Return ``True`` if ``tp`` admits ``None``."""

    tp = strip_annotated(tp)
    return tp is None or tp is NoneType or (is_union(tp) and NoneType in get_args(tp))


def is_protocol(tp: Any) -> bool:
    return isinstance(tp, type) and bool(getattr(tp, "_is_protocol", False))


def is_pydantic_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def is_class_var(tp: Any) -> bool:
    tp = strip_annotated(tp)
    return tp is ClassVar or get_origin(tp) is ClassVar or tp is Final or get_origin(tp) is Final


def _module_namespace(obj: Any) -> dict[str, Any]:
    module = sys.modules.get(getattr(obj, "__module__", "") or "")
    return vars(module) if module is not None else {}


def _resolve(raw: Any, klass: type, localns: dict[str, Any]) -> Any:
    holder = types.SimpleNamespace(__annotations__={"value": raw})
    return get_type_hints(
        holder, globalns=_module_namespace(klass), localns=localns, include_extras=True
    )["value"]


def callable_hints(func: Any, owner: type | None = None) -> dict[str, Any]:
    """Resolve the annotations of ``func``; unresolvable ones are dropped."""

    localns = {owner.__name__: owner} if owner is not None else None
    try:
        return get_type_hints(func, localns=localns, include_extras=True)
    except _RESOLUTION_ERRORS:
        raw = getattr(func, "__annotations__", None) or {}
        return {k: v for k, v in raw.items() if not isinstance(v, str)}


def class_hints(tp: type) -> dict[str, Any]:
    """Return resolved attribute annotations of ``tp`` in declaration order.

    Base class annotations come first; a subclass re-annotating a name keeps
    the base position but takes the subclass type.
    """

    if is_pydantic_model(tp):
        return {name: field.annotation for name, field in tp.model_fields.items()}

    hints: dict[str, Any] = {}
    for klass in reversed(tp.__mro__):
        if klass is object:
            continue
        localns = {klass.__name__: klass, tp.__name__: tp}
        try:
            raw_hints = inspect.get_annotations(klass)
        except _RESOLUTION_ERRORS:
            # Eagerly evaluated annotations with a dangling name.
            continue
        for name, raw in raw_hints.items():
            try:
                hints[name] = _resolve(raw, klass, localns)
            except _RESOLUTION_ERRORS:
                continue
    return hints


__all__ = [
    "NoneType",
    "callable_hints",
    "class_hints",
    "is_class_var",
    "is_optional",
    "is_protocol",
    "is_pydantic_model",
    "is_union",
    "strip_annotated",
]
