"""Ordered table of caller supplied factories overriding built-in rules.

Converters are consulted before any other rule.  A converter registered for a
class also applies to its subclasses, and the first matching entry in
insertion order wins, so callers register the most specific types first.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from contractgen.utils.errors import ArgumentError

Factory = Callable[[], Any]


class ConverterTable:
    """Immutable sequence of ``(target, factory)`` pairs."""

    __slots__ = ("_entries",)

    def __init__(
        self,
        converters: Mapping[Any, Factory] | Iterable[tuple[Any, Factory]] | None = None,
    ) -> None:
        if converters is None:
            items: Iterable[tuple[Any, Factory]] = ()
        elif isinstance(converters, Mapping):
            items = converters.items()
        else:
            items = converters
        entries = tuple((target, factory) for target, factory in items)
        for target, factory in entries:
            if factory is None or not callable(factory):
                raise ArgumentError(
                    f"Converter for {target!r} must be a callable factory, got {factory!r}"
                )
        self._entries: tuple[tuple[Any, Factory], ...] = entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, Factory]]:
        return iter(self._entries)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_entries"):
            raise AttributeError("ConverterTable is immutable")
        object.__setattr__(self, name, value)

    def lookup(self, tp: Any) -> Factory | None:
        """Return the first factory matching ``tp`` exactly or by ancestry."""

        for target, factory in self._entries:
            if _matches(tp, target):
                return factory
        return None


def _matches(tp: Any, target: Any) -> bool:
    if tp is target:
        return True
    if isinstance(tp, type) and isinstance(target, type):
        try:
            return issubclass(tp, target)
        except TypeError:
            return False
    return bool(tp == target)


__all__ = ["ConverterTable", "Factory"]
