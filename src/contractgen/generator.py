"""Public entry point producing populated fixture instances.

:class:`ContractGenerator` holds the immutable configuration (options,
converters, type catalog) and a seed source.  Each call to :meth:`generate`
or :meth:`fill` draws its own random stream from the seed source, so a
generator may be shared across threads and a seeded generator reproduces the
same sequence of results call after call.

Failure policy
--------------
With ``error_policy="lenient"`` (the default) a property whose value cannot
be produced or assigned is logged and skipped, and the call returns a
partially filled instance.  With ``error_policy="strict"`` the first such
failure raises :class:`~contractgen.utils.errors.PropertyAssignmentError`.
:class:`~contractgen.utils.errors.UnsupportedTypeError` is raised under both
policies.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .config import GenerationOptions
from .synth.catalog import SubclassCatalog, TypeCatalog
from .synth.converters import ConverterTable, Factory
from .synth.descriptor import TypeDescriptor, describe
from .synth.dispatcher import Dispatcher
from .synth.guard import RecursionGuard
from .synth.seed import SeedSource
from .utils.errors import ArgumentError
from .utils.logging import get_logger

T = TypeVar("T")

Converters = ConverterTable | Mapping[Any, Factory] | Iterable[tuple[Any, Factory]]


class ContractGenerator:
    """Generate randomized instances of arbitrary data-holding types.

    Parameters
    ----------
    options:
        Generation options; package defaults when omitted.
    converters:
        Factories overriding the built-in rules, keyed by target type.  Order
        matters: the first entry matching a type or one of its ancestors wins,
        so list the most specific types first.
    logger:
        Receiver of lenient-mode property failures.
    catalog:
        Resolves abstract types; :class:`SubclassCatalog` by default, which
        depends on what is imported when the call runs.
    rng:
        Parent random stream; built from ``options.seed`` when omitted.

    Raises
    ------
    ArgumentError
        If a converter factory is ``None`` or not callable.
    """

    def __init__(
        self,
        options: GenerationOptions | None = None,
        converters: Converters | None = None,
        *,
        logger: logging.Logger | None = None,
        catalog: TypeCatalog | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if options is not None and not isinstance(options, GenerationOptions):
            raise ArgumentError(f"options must be GenerationOptions, got {type(options).__name__}")
        self.options: GenerationOptions = options or GenerationOptions()
        self.converters: ConverterTable = (
            converters if isinstance(converters, ConverterTable) else ConverterTable(converters)
        )
        self.catalog: TypeCatalog = catalog if catalog is not None else SubclassCatalog()
        self.logger: logging.Logger = logger if logger is not None else get_logger(__name__)
        self._seeds = SeedSource(rng, seed=self.options.seed)

    def _dispatcher(self) -> Dispatcher:
        return Dispatcher(
            rng=self._seeds.spawn(),
            options=self.options,
            converters=self.converters,
            catalog=self.catalog,
            logger=self.logger,
        )

    def _root(self) -> RecursionGuard:
        return RecursionGuard.root(self.options.max_recursion_depth)

    def generate(self, tp: type[T]) -> T:
        """Return a fully populated instance of ``tp``."""

        return self._dispatcher().dispatch(tp, self._root())

    def generate_many(self, tp: type[T], count: int) -> list[T]:
        """Return ``count`` independently generated instances of ``tp``."""

        if count < 0:
            raise ArgumentError("count must not be negative")
        return [self.generate(tp) for _ in range(count)]

    def fill(self, instance: Any) -> None:
        """Randomize the settable properties of an existing ``instance``."""

        self._dispatcher().fill(instance, self._root())

    @staticmethod
    def describe(tp: Any) -> TypeDescriptor:
        """Return the classification of ``tp``."""

        return describe(tp)


__all__ = ["ContractGenerator", "Converters"]
