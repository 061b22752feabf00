"""Randomized, fully populated test fixtures for arbitrary Python types.

Typical use::

    from contractgen import ContractGenerator

    order = ContractGenerator().generate(Order)

See :class:`contractgen.generator.ContractGenerator` for converters, failure
policies and seeding, and :mod:`contractgen.markers` for annotations such as
``Int16``, ``Char`` or ``Array[int, 2]``.
"""

from .config import GenerationOptions, load_options
from .generator import ContractGenerator
from .markers import (
    Array,
    Char,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    KeyValuePair,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    ZonedDateTime,
)
from .synth.catalog import RegistryCatalog, SubclassCatalog, TypeCatalog
from .synth.converters import ConverterTable
from .synth.descriptor import Kind, TypeDescriptor, describe
from .utils.errors import (
    ArgumentError,
    GenerationError,
    PropertyAssignmentError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "Array",
    "ArgumentError",
    "Char",
    "ContractGenerator",
    "ConverterTable",
    "Float32",
    "Float64",
    "GenerationError",
    "GenerationOptions",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "KeyValuePair",
    "Kind",
    "PropertyAssignmentError",
    "RegistryCatalog",
    "SubclassCatalog",
    "TypeCatalog",
    "TypeDescriptor",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UnsupportedTypeError",
    "ZonedDateTime",
    "__version__",
    "describe",
    "load_options",
]
