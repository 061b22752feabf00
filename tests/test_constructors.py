"""Tests for constructor discovery and argument synthesis."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

import pytest
from pydantic import BaseModel, ConfigDict

from contractgen import ContractGenerator, GenerationOptions, UnsupportedTypeError
from contractgen.markers import Int8, UInt16
from contractgen.synth.constructors import public_constructors


class Tier(Enum):
    FREE = "free"
    PRO = "pro"


class Money:
    def __init__(self, amount: Decimal, currency: str) -> None:
        self.amount = amount
        self.currency = currency


class Temperature:
    def __init__(self, kelvin: float, /) -> None:
        self.kelvin = kelvin

    @classmethod
    def from_celsius(cls, celsius: float) -> Temperature:
        return cls(celsius + 273.15)

    @classmethod
    def _internal(cls) -> Temperature:  # pragma: no cover - never selected
        return cls(0.0)


class Untyped:
    def __init__(self, payload) -> None:  # type: ignore[no-untyped-def]
        self.payload = payload


@dataclass
class Address:
    street: str
    number: UInt16
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


class Point(NamedTuple):
    x: Int8
    y: Int8


class Customer(BaseModel):
    name: str
    tier: Tier
    tags: list[str]
    nickname: str | None = None


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: Decimal
    paid_to: Address


def test_constructor_arguments_synthesized() -> None:
    money = ContractGenerator().generate(Money)
    assert isinstance(money.amount, Decimal)
    assert isinstance(money.currency, str) and money.currency


def test_alternate_constructors_discovered() -> None:
    names = [c.name for c in public_constructors(Temperature)]
    assert names == ["Temperature", "Temperature.from_celsius"]


def test_positional_only_parameters() -> None:
    gen = ContractGenerator(GenerationOptions(seed=3))
    for _ in range(10):
        assert isinstance(gen.generate(Temperature).kelvin, float)


def test_unannotated_required_parameter_is_unsupported() -> None:
    assert public_constructors(Untyped) == ()
    with pytest.raises(UnsupportedTypeError):
        ContractGenerator().generate(Untyped)


def test_dataclass_fields_filled() -> None:
    address = ContractGenerator().generate(Address)
    assert address.street
    assert 1 <= address.number <= 2**16 - 1
    assert 1 <= len(address.notes) <= 10


def test_frozen_dataclass_built_through_constructor() -> None:
    coords = ContractGenerator().generate(Coordinates)
    assert isinstance(coords.lat, float) and isinstance(coords.lon, float)


def test_named_tuple() -> None:
    point = ContractGenerator().generate(Point)
    assert isinstance(point, Point)
    assert point.x != 0 and point.y != 0


def test_pydantic_model() -> None:
    gen = ContractGenerator(GenerationOptions(always_present=True))
    customer = gen.generate(Customer)
    assert isinstance(customer, Customer)
    assert customer.tier in (Tier.FREE, Tier.PRO)
    assert 1 <= len(customer.tags) <= 10
    assert customer.nickname is not None


def test_frozen_pydantic_model_with_nested_dataclass() -> None:
    receipt = ContractGenerator().generate(Receipt)
    assert isinstance(receipt.total, Decimal)
    assert isinstance(receipt.paid_to, Address)


class Profile(BaseModel):
    name: str
    age: int

    @classmethod
    def anonymous(cls, age: int) -> Profile:
        return cls(name="anonymous", age=age)


def test_model_library_classmethods_are_not_constructors() -> None:
    assert [c.name for c in public_constructors(Customer)] == ["Customer"]
    assert [c.name for c in public_constructors(Receipt)] == ["Receipt"]


def test_model_keeps_its_own_classmethods() -> None:
    names = [c.name for c in public_constructors(Profile)]
    assert names == ["Profile", "Profile.anonymous"]


def test_dataclass_and_named_tuple_expose_primary_constructor_only() -> None:
    assert [c.name for c in public_constructors(Address)] == ["Address"]
    assert [c.name for c in public_constructors(Point)] == ["Point"]


@pytest.mark.parametrize("seed", range(20))
def test_model_with_required_fields_generates_for_every_seed(seed: int) -> None:
    profile = ContractGenerator(GenerationOptions(seed=seed)).generate(Profile)
    assert isinstance(profile, Profile)
    assert isinstance(profile.age, int)
