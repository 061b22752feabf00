"""Classification of declared types into production rules.

:func:`describe` maps any annotation to a :class:`TypeDescriptor` whose
``kind`` selects the rule the dispatcher applies.  The checks below run in the
dispatcher's rule order; the first match wins.  Converter overrides are not
part of classification since they depend on the generator's configuration.
"""

from __future__ import annotations

import collections.abc as cabc
import inspect
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Union, get_args, get_origin

from contractgen.markers import ArrayType, KeyValuePair

from .constructors import accepts_no_arguments
from .introspect import NoneType, is_protocol, is_union, strip_annotated
from .scalars import PRIMITIVES, TEMPORALS

MAX_TUPLE_ARITY = 8

# Modules whose generic classes are treated as containers or rejected, never
# instantiated as user composites.
_STDLIB_GENERIC_MODULES = frozenset({"builtins", "collections", "collections.abc", "typing"})
_BUILTIN_CONTAINERS = (list, dict, set, frozenset)


class Kind(Enum):
    """Production rule selected for a declared type."""

    SCALAR = "scalar"
    ENUM = "enum"
    LITERAL = "literal"
    TEMPORAL = "temporal"
    OPTIONAL = "optional"
    UNION = "union"
    PAIR = "pair"
    TUPLE = "tuple"
    ARRAY = "array"
    DICTIONARY = "dictionary"
    SET = "set"
    SEQUENCE = "sequence"
    ABSTRACT = "abstract"
    CONSTRUCTED = "constructed"
    PARAMETERIZED = "parameterized"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class TypeDescriptor:
    """Runtime metadata for one declared type.

    ``origin`` is the container class to build (``None`` for non-containers),
    ``args`` the generic arguments, ``rank`` the array rank and ``wrapped`` the
    present type of an optional.
    """

    kind: Kind
    target: Any
    origin: Any = None
    args: tuple[Any, ...] = ()
    rank: int = 0
    wrapped: Any = None


def _lookup(table: dict[Any, Any], tp: Any) -> bool:
    try:
        return tp in table
    except TypeError:  # unhashable annotation
        return False


def _container_kind(origin: type) -> Kind | None:
    if origin in (str, bytes, bytearray):
        return None
    if issubclass(origin, cabc.Mapping):
        return Kind.DICTIONARY
    if issubclass(origin, cabc.Set):
        return Kind.SET
    if issubclass(origin, cabc.Iterable):
        return Kind.SEQUENCE
    return None


def _describe_tuple(tp: Any, args: tuple[Any, ...]) -> TypeDescriptor:
    if len(args) == 2 and args[1] is Ellipsis:
        return TypeDescriptor(Kind.ARRAY, tp, origin=tuple, args=(args[0],), rank=1)
    if 1 <= len(args) <= MAX_TUPLE_ARITY:
        return TypeDescriptor(Kind.TUPLE, tp, origin=tuple, args=args)
    return TypeDescriptor(Kind.UNSUPPORTED, tp)


def describe(tp: Any) -> TypeDescriptor:
    """Classify ``tp`` into the production rule that will synthesize it."""

    tp = strip_annotated(tp)
    if tp is Any:
        return TypeDescriptor(Kind.UNSUPPORTED, tp)
    origin = get_origin(tp)
    args = get_args(tp)

    if _lookup(PRIMITIVES, tp):
        return TypeDescriptor(Kind.SCALAR, tp)
    if isinstance(tp, type) and issubclass(tp, Enum):
        return TypeDescriptor(Kind.ENUM, tp, args=tuple(tp))
    if origin is Literal:
        return TypeDescriptor(Kind.LITERAL, tp, args=args)
    if _lookup(TEMPORALS, tp):
        return TypeDescriptor(Kind.TEMPORAL, tp)

    if is_union(tp):
        present = tuple(a for a in args if a is not NoneType)
        if len(present) < len(args):
            wrapped = present[0] if len(present) == 1 else Union[present]
            return TypeDescriptor(Kind.OPTIONAL, tp, args=present, wrapped=wrapped)
        return TypeDescriptor(Kind.UNION, tp, args=args)

    if tp is KeyValuePair or origin is KeyValuePair:
        return TypeDescriptor(Kind.PAIR, tp, origin=KeyValuePair, args=args or (Any, Any))
    if origin is tuple or tp is tuple:
        return _describe_tuple(tp, args)
    if isinstance(tp, ArrayType):
        return TypeDescriptor(Kind.ARRAY, tp, origin=list, args=(tp.element,), rank=tp.rank)

    if origin is None and isinstance(tp, type):
        origin = tp
    if isinstance(origin, type):
        stdlib = origin.__module__ in _STDLIB_GENERIC_MODULES
        kind = None
        if stdlib or issubclass(origin, _BUILTIN_CONTAINERS):
            kind = _container_kind(origin)
        if kind is not None:
            return _describe_container(kind, tp, origin, args)
        if stdlib and origin is not object:
            # Callable[...], type[...] and friends.
            return TypeDescriptor(Kind.UNSUPPORTED, tp)
        # Plain classes, and user generics such as ``Box[int]`` built as ``Box``.
        return _describe_class(origin)
    return TypeDescriptor(Kind.UNSUPPORTED, tp)


def _describe_container(
    kind: Kind, tp: Any, origin: type, args: tuple[Any, ...]
) -> TypeDescriptor:
    if kind is Kind.DICTIONARY and issubclass(origin, Counter) and len(args) == 1:
        args = (args[0], int)
    expected = 2 if kind is Kind.DICTIONARY else 1
    if len(args) != expected:
        # Bare or mis-parameterized containers give nothing to synthesize.
        return TypeDescriptor(Kind.UNSUPPORTED, tp)
    return TypeDescriptor(kind, tp, origin=origin, args=args)


def _describe_class(tp: type) -> TypeDescriptor:
    if inspect.isabstract(tp) or is_protocol(tp):
        return TypeDescriptor(Kind.ABSTRACT, tp)
    if accepts_no_arguments(tp):
        return TypeDescriptor(Kind.CONSTRUCTED, tp)
    return TypeDescriptor(Kind.PARAMETERIZED, tp)


__all__ = ["Kind", "MAX_TUPLE_ARITY", "TypeDescriptor", "describe"]
