"""Tests for abstract type resolution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

import pytest

from contractgen import (
    ArgumentError,
    ContractGenerator,
    GenerationOptions,
    RegistryCatalog,
    SubclassCatalog,
    TypeCatalog,
    UnsupportedTypeError,
)


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Square(Shape):
    side: float = 1.0

    def area(self) -> float:
        return self.side**2


class Circle(Shape):
    radius: float = 1.0

    def area(self) -> float:
        return 3.14159 * self.radius**2


class Polygon(Shape, ABC):
    @abstractmethod
    def corners(self) -> int: ...


class Triangle(Polygon):
    def area(self) -> float:
        return 0.5

    def corners(self) -> int:
        return 3


class _Hidden(Shape):
    def area(self) -> float:
        return 0.0


class Orphan(ABC):
    @abstractmethod
    def run(self) -> None: ...


class Greeter(Protocol):
    def greet(self) -> str: ...


class English:
    def greet(self) -> str:
        return "hello"


class Drawing:
    outline: Shape | None = None


def test_subclass_catalog_is_sorted_and_transitive() -> None:
    found = SubclassCatalog().implementations(Shape)
    assert list(found) == [Circle, Square, Triangle]


def test_catalogs_satisfy_protocol() -> None:
    assert isinstance(SubclassCatalog(), TypeCatalog)
    assert isinstance(RegistryCatalog(), TypeCatalog)


def test_abstract_resolves_to_every_implementation() -> None:
    gen = ContractGenerator()
    seen = {type(gen.generate(Shape)) for _ in range(60)}
    assert seen == {Circle, Square, Triangle}


def test_resolved_instance_is_filled() -> None:
    gen = ContractGenerator(catalog=RegistryCatalog({Shape: [Square]}))
    square = gen.generate(Shape)
    assert isinstance(square, Square)
    assert square.side != 1.0


def test_no_implementation_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError):
        ContractGenerator().generate(Orphan)


def test_unsupported_propagates_from_property_even_when_lenient() -> None:
    gen = ContractGenerator(GenerationOptions(always_present=True), catalog=RegistryCatalog())
    with pytest.raises(UnsupportedTypeError):
        gen.generate(Drawing)


def test_protocol_through_registry() -> None:
    gen = ContractGenerator(catalog=RegistryCatalog({Greeter: [English]}))
    assert isinstance(gen.generate(Greeter), English)
    with pytest.raises(UnsupportedTypeError):
        ContractGenerator().generate(Greeter)


def test_registry_rejects_non_subclass() -> None:
    with pytest.raises(ArgumentError):
        RegistryCatalog({Shape: [English]})


def test_with_implementations_returns_new_catalog() -> None:
    empty = RegistryCatalog()
    extended = empty.with_implementations(Shape, Circle)
    assert list(empty.implementations(Shape)) == []
    assert list(extended.implementations(Shape)) == [Circle]
