"""Type catalogs resolving abstract types to concrete implementations.

The default :class:`SubclassCatalog` answers from the classes currently
imported in the process, so the same abstract type may resolve differently in
another environment even with a fixed seed.  :class:`RegistryCatalog` answers
from an explicit mapping fixed at configuration time and is the choice when
generated fixtures must not depend on import side effects.

Structural implementers of a :class:`typing.Protocol` are invisible to
``__subclasses__``; register them explicitly.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol, runtime_checkable

from contractgen.utils.errors import ArgumentError

from .constructors import public_constructors
from .introspect import is_protocol


@runtime_checkable
class TypeCatalog(Protocol):
    """Capability listing concrete, constructible types assignable to a base."""

    def implementations(self, base: type) -> Sequence[type]:
        """Return candidate implementations of ``base`` in a stable order."""

        ...


def is_constructible(cls: object) -> bool:
    """Return ``True`` for public, concrete classes with a usable constructor."""

    return (
        isinstance(cls, type)
        and not cls.__name__.startswith("_")
        and not inspect.isabstract(cls)
        and not is_protocol(cls)
        and bool(public_constructors(cls))
    )


def _sort_key(cls: type) -> tuple[str, str]:
    return (cls.__module__, cls.__qualname__)


class SubclassCatalog:
    """Discover implementations by walking ``__subclasses__`` transitively."""

    def implementations(self, base: type) -> Sequence[type]:
        seen: set[type] = set()
        stack = [base]
        found: list[type] = []
        while stack:
            cls = stack.pop()
            for sub in cls.__subclasses__():
                if sub in seen:
                    continue
                seen.add(sub)
                stack.append(sub)
                if is_constructible(sub):
                    found.append(sub)
        return sorted(found, key=_sort_key)


class RegistryCatalog:
    """Answer from implementations registered up front.

    Parameters
    ----------
    registry:
        Mapping from an abstract base to its concrete implementations.  Each
        implementation must be a subclass of its base unless the base is a
        protocol, which is checked structurally by the caller.
    """

    def __init__(self, registry: Mapping[type, Iterable[type]] | None = None) -> None:
        entries: dict[type, tuple[type, ...]] = {}
        for base, impls in (registry or {}).items():
            impls = tuple(impls)
            for impl in impls:
                if not isinstance(impl, type):
                    raise ArgumentError(f"{impl!r} is not a class")
                if not is_protocol(base) and not issubclass(impl, base):
                    raise ArgumentError(
                        f"{impl.__qualname__} is not a subclass of {base.__qualname__}"
                    )
            entries[base] = impls
        self._registry = entries

    def with_implementations(self, base: type, *impls: type) -> "RegistryCatalog":
        """Return a new catalog with ``impls`` appended for ``base``."""

        merged = dict(self._registry)
        merged[base] = merged.get(base, ()) + impls
        return RegistryCatalog(merged)

    def implementations(self, base: type) -> Sequence[type]:
        return tuple(c for c in self._registry.get(base, ()) if is_constructible(c))


__all__ = ["RegistryCatalog", "SubclassCatalog", "TypeCatalog", "is_constructible"]
