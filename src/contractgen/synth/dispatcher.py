"""Central dispatch from a declared type to a synthesized value.

Rule order, first match wins:

1.  converter override (exact type or ancestor)
2.  primitives
3.  enumerations and literals
4.  date/time values and UUIDs
5.  optionals (and plain unions)
6.  key/value pairs
7.  fixed-arity tuples
8.  arrays
9.  mappings (and sets)
10. sequences
11. abstract classes and protocols, through the type catalog
12. classes constructible without arguments, then property filling
13. classes needing constructor arguments
14. anything else is unsupported

Rules 11-13 create composite nodes.  A node at or beyond the configured
recursion depth is still constructed but its properties are left alone, which
bounds self-referential type graphs.
"""

from __future__ import annotations

import inspect
import logging
import random
from collections.abc import Callable, Collection
from typing import Any

from contractgen.config import GenerationOptions
from contractgen.utils.errors import UnsupportedTypeError

from .catalog import TypeCatalog
from .constructors import public_constructors
from .containers import CollectionBuilder
from .converters import ConverterTable
from .descriptor import Kind, TypeDescriptor, describe
from .guard import RecursionGuard
from .introspect import is_optional, strip_annotated
from .properties import PropertyFiller
from .scalars import PRIMITIVES, TEMPORALS, Scalars

Handler = Callable[[TypeDescriptor, RecursionGuard, "str | None"], Any]


class Dispatcher:
    """Synthesize values for declared types within one generation call.

    A dispatcher owns the random stream of a single call and must not be
    shared across threads.
    """

    def __init__(
        self,
        *,
        rng: random.Random,
        options: GenerationOptions,
        converters: ConverterTable,
        catalog: TypeCatalog,
        logger: logging.Logger,
    ) -> None:
        self.rng = rng
        self.options = options
        self.converters = converters
        self.catalog = catalog
        self.logger = logger
        self.scalars = Scalars(rng, options)
        self.collections = CollectionBuilder(rng, options)
        self.filler = PropertyFiller(self.dispatch, strict=options.strict, logger=logger)
        self._handlers: dict[Kind, Handler] = {
            Kind.SCALAR: self._scalar,
            Kind.ENUM: self._choice,
            Kind.LITERAL: self._choice,
            Kind.TEMPORAL: self._temporal,
            Kind.OPTIONAL: self._optional,
            Kind.UNION: self._union,
            Kind.PAIR: self._pair,
            Kind.TUPLE: self._tuple,
            Kind.ARRAY: self._array,
            Kind.DICTIONARY: self._dictionary,
            Kind.SET: self._set,
            Kind.SEQUENCE: self._sequence,
            Kind.ABSTRACT: self._abstract,
            Kind.CONSTRUCTED: self._constructed,
            Kind.PARAMETERIZED: self._parameterized,
            Kind.UNSUPPORTED: self._unsupported,
        }

    # -- Entry points -------------------------------------------------------

    def dispatch(self, tp: Any, guard: RecursionGuard, name: str | None = None) -> Any:
        """Return a value for ``tp`` at the depth recorded by ``guard``.

        ``name`` is the property or parameter receiving the value, if any.
        """

        tp = strip_annotated(tp)
        factory = self.converters.lookup(tp)
        if factory is not None:
            return factory()
        desc = describe(tp)
        return self._handlers[desc.kind](desc, guard, name)

    def fill(
        self, instance: Any, guard: RecursionGuard, supplied: Collection[str] = ()
    ) -> None:
        """Fill the properties of a node created at ``guard`` unless the depth is exhausted.

        Properties named in ``supplied`` were set through the constructor and are kept.
        """

        if guard.exhausted:
            self.logger.debug(
                "Depth %d reached; leaving %s unfilled", guard.depth, type(instance).__qualname__
            )
            return
        self.filler.fill(instance, guard.descend(), supplied)

    # -- Leaf rules ---------------------------------------------------------

    def _scalar(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        if desc.target is str:
            return self.scalars.text(name)
        return PRIMITIVES[desc.target](self.scalars)

    def _choice(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        if not desc.args:
            raise UnsupportedTypeError(desc.target, "no members to choose from")
        return self.rng.choice(desc.args)

    def _temporal(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        return TEMPORALS[desc.target](self.scalars)

    def _optional(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        if not self.options.always_present and self.scalars.boolean():
            return None
        return self.dispatch(desc.wrapped, guard, name)

    def _union(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        return self.dispatch(self.rng.choice(desc.args), guard, name)

    # -- Containers ---------------------------------------------------------

    def _element(self, guard: RecursionGuard) -> Callable[[Any], Any]:
        return lambda tp: self.dispatch(tp, guard)

    def _pair(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        key_type, value_type = desc.args
        return self.collections.pair(key_type, value_type, self._element(guard))

    def _tuple(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        return self.collections.tuple_(desc.args, self._element(guard))

    def _array(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        return self.collections.array(
            desc.args[0], desc.rank, self._element(guard), container=desc.origin
        )

    def _dictionary(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        key_type, value_type = desc.args
        return self.collections.mapping(desc.origin, key_type, value_type, self._element(guard))

    def _set(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        return self.collections.set_(desc.origin, desc.args[0], self._element(guard))

    def _sequence(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        return self.collections.sequence(desc.origin, desc.args[0], self._element(guard))

    # -- Composite rules ----------------------------------------------------

    def _abstract(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        candidates = list(self.catalog.implementations(desc.target))
        if not candidates:
            raise UnsupportedTypeError(desc.target, "no concrete implementation found")
        chosen = self.rng.choice(candidates)
        self.logger.debug("Resolved %s to %s", desc.target.__qualname__, chosen.__qualname__)
        return self.dispatch(chosen, guard, name)

    def _constructed(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        instance = desc.target()
        self.fill(instance, guard)
        return instance

    def _parameterized(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        tp = desc.target
        constructors = public_constructors(tp)
        if not constructors:
            raise UnsupportedTypeError(tp, "no public constructor")
        ctor = self.rng.choice(constructors)
        arg_guard = guard.constructing(tp).descend()

        values: dict[str, Any] = {}
        for param in ctor.parameters:
            annotation = ctor.annotation(param)
            if guard.exhausted:
                # Past the limit: only what the constructor cannot do without.
                if param.default is not inspect.Parameter.empty:
                    continue
                if is_optional(annotation):
                    values[param.name] = None
                    continue
            if annotation is inspect.Parameter.empty:
                continue
            values[param.name] = self.dispatch(annotation, arg_guard, param.name)

        instance = ctor.invoke(values)
        self.fill(instance, guard, values.keys())
        return instance

    def _unsupported(self, desc: TypeDescriptor, guard: RecursionGuard, name: str | None) -> Any:
        raise UnsupportedTypeError(desc.target)


__all__ = ["Dispatcher"]
