"""Builders for collections, pairs and tuples.

Every builder receives a ``synth`` callback that produces one value for a
declared element type; the callback already carries the caller's recursion
guard, so elements of a collection sit at the same depth as the collection.

Mappings and sets stop early when a freshly synthesized key collides with an
accepted one.  The requested size is therefore an upper bound: small key
domains (``bool``, short enums) regularly yield fewer entries than drawn.
"""

from __future__ import annotations

import inspect
import random
from collections import UserDict, UserList, defaultdict, deque
from collections.abc import Callable, Iterable
from typing import Any

from contractgen.config import GenerationOptions
from contractgen.markers import KeyValuePair
from contractgen.utils.errors import UnsupportedTypeError
from contractgen.utils.logging import get_logger

Synth = Callable[[Any], Any]

# Concrete containers whose constructor takes the items themselves.
_ITEM_BUILT = (list, tuple, set, frozenset, dict, deque, UserList, UserDict)

logger = get_logger(__name__)


def _realize(origin: type, candidates: tuple[type, ...]) -> Callable[[Iterable[Any]], Any]:
    """Return a callable building ``origin`` (or a concrete stand-in) from items."""

    if not inspect.isabstract(origin):
        if origin is defaultdict:
            return lambda items: defaultdict(None, items)
        if issubclass(origin, _ITEM_BUILT):
            return origin
        # enumerate, map and other iterators take items but yield something else.
        raise UnsupportedTypeError(origin, "cannot be built from its items")
    for candidate in candidates:
        if issubclass(candidate, origin):
            return candidate
    raise UnsupportedTypeError(origin, "no concrete container implements it")


class CollectionBuilder:
    """Size policy and assembly of container values."""

    def __init__(self, rng: random.Random, options: GenerationOptions) -> None:
        self.rng = rng
        self.options = options

    def count(self) -> int:
        """Return a collection size in ``[min_count, max_count]``."""

        return self.rng.randint(self.options.min_count, self.options.max_count)

    def pair(self, key_type: Any, value_type: Any, synth: Synth) -> KeyValuePair[Any, Any]:
        key = synth(key_type)
        return KeyValuePair(key, synth(value_type))

    def tuple_(self, types: tuple[Any, ...], synth: Synth) -> tuple[Any, ...]:
        return tuple(synth(tp) for tp in types)

    def sequence(self, origin: type, element: Any, synth: Synth) -> Any:
        build = _realize(origin, (list, tuple))
        return build([synth(element) for _ in range(self.count())])

    def array(self, element: Any, rank: int, synth: Synth, *, container: type = list) -> Any:
        """Return a rank ``rank`` rectangular array of nested ``container``.

        One size is drawn and reused for every dimension.
        """

        size = self.count()

        def build(level: int) -> Any:
            if level == rank:
                return container(synth(element) for _ in range(size))
            return container(build(level + 1) for _ in range(size))

        return build(1)

    def mapping(self, origin: type, key_type: Any, value_type: Any, synth: Synth) -> Any:
        """Return a mapping with at most a random target number of entries.

        The target is drawn in ``[1, max_count]``.  Generation stops at the
        first key collision, so the result may be smaller.
        """

        build = _realize(origin, (dict,))
        target = self.rng.randint(1, self.options.max_count) if self.options.max_count else 0
        entries: dict[Any, Any] = {}
        while len(entries) < target:
            key = synth(key_type)
            if key in entries:
                logger.debug("Key collision after %d of %d entries", len(entries), target)
                break
            entries[key] = synth(value_type)
        return build(entries)

    def set_(self, origin: type, element: Any, synth: Synth) -> Any:
        """Return a set drawn like :meth:`mapping` keys, sized in ``[min_count, max_count]``."""

        build = _realize(origin, (set, frozenset))
        target = self.count()
        items: set[Any] = set()
        while len(items) < target:
            item = synth(element)
            if item in items:
                logger.debug("Element collision after %d of %d items", len(items), target)
                break
            items.add(item)
        return build(items)


__all__ = ["CollectionBuilder", "Synth"]
