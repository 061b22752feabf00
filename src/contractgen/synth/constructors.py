"""Constructor discovery and invocation.

A class exposes its primary constructor (calling the class itself, described
by :func:`inspect.signature`) and, optionally, alternate constructors: public
classmethods whose return annotation is the class or ``Self``, for example::

    @classmethod
    def from_parts(cls, left: str, right: str) -> "Pair": ...

A constructor is usable when every parameter that has no default carries a
resolvable annotation, since that annotation is what gets synthesized.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from .introspect import callable_hints, class_hints, is_pydantic_model

_EMPTY = inspect.Parameter.empty
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class Constructor:
    """A way of building instances of ``owner``."""

    owner: type
    name: str
    func: Callable[..., Any]
    parameters: tuple[inspect.Parameter, ...]
    hints: Mapping[str, Any] = field(default_factory=dict)

    def annotation(self, param: inspect.Parameter) -> Any:
        """Return the resolved annotation of ``param`` or ``inspect.Parameter.empty``."""

        if param.name in self.hints:
            return self.hints[param.name]
        if param.annotation is _EMPTY or isinstance(param.annotation, str):
            return _EMPTY
        return param.annotation

    @property
    def parameterless(self) -> bool:
        return all(p.default is not _EMPTY for p in self.parameters)

    @property
    def usable(self) -> bool:
        return all(
            p.default is not _EMPTY or self.annotation(p) is not _EMPTY for p in self.parameters
        )

    def invoke(self, values: Mapping[str, Any]) -> Any:
        """Call the constructor; positional-only parameters are passed by position."""

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for param in self.parameters:
            if param.name not in values:
                continue
            if param.kind is inspect.Parameter.POSITIONAL_ONLY:
                args.append(values[param.name])
            else:
                kwargs[param.name] = values[param.name]
        return self.func(*args, **kwargs)


def _parameters(sig: inspect.Signature) -> tuple[inspect.Parameter, ...]:
    return tuple(p for p in sig.parameters.values() if p.kind not in _VARIADIC)


def primary_constructor(tp: type) -> Constructor:
    """Return the constructor reached by calling ``tp`` directly."""

    try:
        sig = inspect.signature(tp)
    except (TypeError, ValueError):
        # Builtins without text signatures: assume a bare call works.
        return Constructor(tp, tp.__qualname__, tp, ())

    hints = dict(class_hints(tp))
    if not is_pydantic_model(tp) and tp.__init__ is not object.__init__:
        hints.update(callable_hints(tp.__init__, owner=tp))
    params = _parameters(sig)
    names = {p.name for p in params}
    return Constructor(tp, tp.__qualname__, tp, params, {k: v for k, v in hints.items() if k in names})


def _returns_owner(func: Callable[..., Any], tp: type) -> bool:
    raw = getattr(func, "__annotations__", {}).get("return", _EMPTY)
    if isinstance(raw, str):
        return raw.strip("'\"") in {tp.__name__, tp.__qualname__, "Self", "typing.Self"}
    return raw is tp or raw is Self


_LIBRARY_MODULES = ("builtins", "typing", "abc", "collections", "pydantic")


def _is_library_class(klass: type) -> bool:
    module = klass.__module__ or ""
    return any(module == m or module.startswith(m + ".") for m in _LIBRARY_MODULES)


def alternate_constructors(tp: type) -> list[Constructor]:
    """Return public classmethods declared to return ``tp`` (or ``Self``)."""

    found: dict[str, Constructor] = {}
    for klass in tp.__mro__:
        if _is_library_class(klass):
            # BaseModel.model_validate and friends are not user constructors.
            continue
        for name, raw in vars(klass).items():
            if name.startswith("_") or name in found or not isinstance(raw, classmethod):
                continue
            if not _returns_owner(raw.__func__, tp):
                continue
            bound = getattr(tp, name)
            try:
                sig = inspect.signature(bound)
            except (TypeError, ValueError):
                continue
            hints = callable_hints(raw.__func__, owner=tp)
            found[name] = Constructor(tp, f"{tp.__qualname__}.{name}", bound, _parameters(sig), hints)
    return list(found.values())


@functools.lru_cache(maxsize=512)
def public_constructors(tp: type) -> tuple[Constructor, ...]:
    """Return every usable constructor of ``tp``, primary first."""

    candidates = [primary_constructor(tp), *alternate_constructors(tp)]
    return tuple(c for c in candidates if c.usable)


def accepts_no_arguments(tp: type) -> bool:
    """Return ``True`` if ``tp()`` needs no arguments."""

    return primary_constructor(tp).parameterless


__all__ = [
    "Constructor",
    "accepts_no_arguments",
    "alternate_constructors",
    "primary_constructor",
    "public_constructors",
]
