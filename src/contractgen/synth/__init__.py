"""Type-driven synthesis engine.

The :class:`~contractgen.synth.dispatcher.Dispatcher` classifies a declared
type (:mod:`~contractgen.synth.descriptor`) and delegates to scalar, container,
catalog and constructor components, filling composite instances through the
:class:`~contractgen.synth.properties.PropertyFiller`.
"""

from .catalog import RegistryCatalog, SubclassCatalog, TypeCatalog
from .converters import ConverterTable
from .descriptor import Kind, TypeDescriptor, describe
from .dispatcher import Dispatcher
from .guard import RecursionGuard
from .seed import SeedSource, rng_for

__all__ = [
    "ConverterTable",
    "Dispatcher",
    "Kind",
    "RecursionGuard",
    "RegistryCatalog",
    "SeedSource",
    "SubclassCatalog",
    "TypeCatalog",
    "TypeDescriptor",
    "describe",
    "rng_for",
]
