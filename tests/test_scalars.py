"""Tests for primitive and temporal value generation."""

from __future__ import annotations

import random
import struct
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from contractgen import ContractGenerator, GenerationOptions
from contractgen.markers import (
    Char,
    Float32,
    Int8,
    Int16,
    Int64,
    UInt8,
    UInt32,
    UInt64,
    ZonedDateTime,
)
from contractgen.synth.scalars import ALPHABET, Scalars

DRAWS = 200


def _scalars(seed: int = 0, **options: object) -> Scalars:
    return Scalars(random.Random(seed), GenerationOptions(**options))


def test_text_within_bounds_and_alphabet() -> None:
    s = _scalars()
    for _ in range(DRAWS):
        value = s.text()
        assert 3 <= len(value) <= 20
        assert set(value) <= set(ALPHABET)


def test_text_fixed_length() -> None:
    s = _scalars(min_text_length=7, max_text_length=7)
    assert all(len(s.text()) == 7 for _ in range(20))


def test_text_starts_with_property_name() -> None:
    s = _scalars(use_property_names=True)
    for _ in range(DRAWS):
        value = s.text("reference")
        assert 3 <= len(value) <= 20
        assert value.startswith("reference") or "reference".startswith(value)


def test_property_name_ignored_when_disabled() -> None:
    s = _scalars(min_text_length=20, max_text_length=20)
    assert not all(s.text("reference").startswith("reference") for _ in range(20))


@pytest.mark.parametrize(
    ("marker", "low", "high"),
    [
        (Int8, -(2**7) + 1, 2**7 - 1),
        (Int16, -(2**15) + 1, 2**15 - 1),
        (int, -(2**31) + 1, 2**31 - 1),
        (Int64, -(2**63) + 1, 2**63 - 1),
        (UInt8, 1, 2**8 - 1),
        (UInt32, 1, 2**32 - 1),
        (UInt64, 1, 2**64 - 1),
    ],
)
def test_integer_ranges_never_zero(marker: object, low: int, high: int) -> None:
    gen = ContractGenerator(GenerationOptions(seed=11))
    for _ in range(DRAWS):
        value = gen.generate(marker)
        assert type(value) is int
        assert value != 0
        assert low <= value <= high


def test_signed_values_take_both_signs() -> None:
    gen = ContractGenerator(GenerationOptions(seed=5))
    values = [gen.generate(Int8) for _ in range(DRAWS)]
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


def test_bool_is_not_an_integer() -> None:
    gen = ContractGenerator(GenerationOptions(seed=2))
    values = {gen.generate(bool) for _ in range(DRAWS)}
    assert values == {True, False}


def test_float32_is_single_precision() -> None:
    s = _scalars()
    for _ in range(DRAWS):
        value = s.float32()
        assert struct.unpack("f", struct.pack("f", value))[0] == value


def test_floats_are_finite() -> None:
    gen = ContractGenerator()
    for marker in (float, Float32):
        for _ in range(DRAWS):
            value = gen.generate(marker)
            assert isinstance(value, float)
            assert value == value and abs(value) != float("inf")


def test_decimal_never_zero() -> None:
    s = _scalars()
    for _ in range(DRAWS):
        value = s.decimal()
        assert isinstance(value, Decimal)
        assert value != 0


def test_char_and_bytes() -> None:
    gen = ContractGenerator()
    char = gen.generate(Char)
    assert len(char) == 1 and char in ALPHABET
    data = gen.generate(bytes)
    assert isinstance(data, bytes) and 3 <= len(data) <= 20


def test_instant_is_naive_or_utc() -> None:
    s = _scalars()
    kinds = set()
    for _ in range(DRAWS):
        value = s.instant()
        assert value.tzinfo in (None, timezone.utc)
        kinds.add(value.tzinfo)
    assert kinds == {None, timezone.utc}


def test_zoned_instant_has_quarter_hour_offset() -> None:
    gen = ContractGenerator(GenerationOptions(seed=4))
    for _ in range(DRAWS):
        value = gen.generate(ZonedDateTime)
        offset = value.utcoffset()
        assert offset is not None
        assert timedelta(hours=-12) <= offset <= timedelta(hours=14)
        assert offset.total_seconds() % (15 * 60) == 0


def test_temporal_types() -> None:
    gen = ContractGenerator()
    assert isinstance(gen.generate(datetime), datetime)
    assert isinstance(gen.generate(date), date)
    assert isinstance(gen.generate(time), time)
    duration = gen.generate(timedelta)
    assert isinstance(duration, timedelta) and duration >= timedelta(0)
    ident = gen.generate(uuid.UUID)
    assert isinstance(ident, uuid.UUID) and ident.version == 4
