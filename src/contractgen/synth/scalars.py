"""Generators for primitive values.

Every generator draws from the injected :class:`random.Random` only, so a
seeded stream reproduces the same values.  Numeric generators never return the
type's zero value, which keeps generated fixtures distinguishable from
default-initialized ones.
"""

from __future__ import annotations

import random
import string
import struct
import uuid
from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Any

from contractgen.config import GenerationOptions
from contractgen.markers import (
    Char,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    ZonedDateTime,
)

ALPHABET: str = string.ascii_letters + string.digits

# Largest magnitude per integer marker; signed widths are mirrored around zero.
_SIGNED_MAX: dict[Any, int] = {
    Int8: 2**7 - 1,
    Int16: 2**15 - 1,
    Int32: 2**31 - 1,
    Int64: 2**63 - 1,
    int: 2**31 - 1,
}
_UNSIGNED_MAX: dict[Any, int] = {
    UInt8: 2**8 - 1,
    UInt16: 2**16 - 1,
    UInt32: 2**32 - 1,
    UInt64: 2**64 - 1,
}

_FLOAT32_EXPONENT = (-126, 127)
_FLOAT64_EXPONENT = (-1022, 1023)

_MAX_YEAR = 2999
_MAX_DURATION_DAYS = 10_675_199


class Scalars:
    """Stateless primitive generators bound to a random stream."""

    def __init__(self, rng: random.Random, options: GenerationOptions) -> None:
        self.rng = rng
        self.options = options

    # -- Text ---------------------------------------------------------------

    def char(self) -> str:
        return self.rng.choice(ALPHABET)

    def text(self, name: str | None = None) -> str:
        """Return a random string within the configured length bounds.

        With ``use_property_names`` enabled and a property ``name`` given, the
        value starts with the name and is padded or cut to a length that still
        honors the bounds.
        """

        opts = self.options
        length = self.rng.randint(opts.min_text_length, opts.max_text_length)
        prefix = name if (opts.use_property_names and name) else ""
        prefix = prefix[:length]
        return prefix + "".join(self.rng.choices(ALPHABET, k=length - len(prefix)))

    def bytes_(self) -> bytes:
        opts = self.options
        length = self.rng.randint(opts.min_text_length, opts.max_text_length)
        return bytes(self.rng.getrandbits(8) for _ in range(length))

    # -- Numbers ------------------------------------------------------------

    def boolean(self) -> bool:
        return self.rng.random() < 0.5

    def signed(self, bound: int) -> int:
        value = self.rng.randint(1, bound)
        return value if self.boolean() else -value

    def unsigned(self, bound: int) -> int:
        return self.rng.randint(1, bound)

    def float64(self) -> float:
        mantissa = self.rng.random() * 2.0 - 1.0
        return mantissa * 2.0 ** self.rng.randint(*_FLOAT64_EXPONENT)

    def float32(self) -> float:
        mantissa = self.rng.random() * 2.0 - 1.0
        value = mantissa * 2.0 ** self.rng.randint(*_FLOAT32_EXPONENT)
        return struct.unpack("f", struct.pack("f", value))[0]

    def decimal(self) -> Decimal:
        whole = self.signed(_SIGNED_MAX[Int8])
        fraction = Decimal(self.rng.randint(0, 255)) / Decimal(256)
        return Decimal(whole) + fraction

    # -- Time ---------------------------------------------------------------

    def _datetime_fields(self) -> dict[str, int]:
        rng = self.rng
        return {
            "year": rng.randint(1, _MAX_YEAR),
            "month": rng.randint(1, 12),
            "day": rng.randint(1, 28),
            "hour": rng.randint(0, 23),
            "minute": rng.randint(0, 59),
            "second": rng.randint(0, 59),
            "microsecond": rng.randint(0, 999_999),
        }

    def instant(self) -> datetime:
        """Return a datetime that is either naive or in UTC."""

        tz = self.rng.choice((None, timezone.utc))
        return datetime(**self._datetime_fields(), tzinfo=tz)

    def zoned_instant(self) -> datetime:
        quarters = self.rng.randint(-12 * 4, 14 * 4)
        tz = timezone(timedelta(minutes=15 * quarters))
        return datetime(**self._datetime_fields(), tzinfo=tz)

    def duration(self) -> timedelta:
        rng = self.rng
        return timedelta(
            days=rng.randint(0, _MAX_DURATION_DAYS),
            hours=rng.randint(0, 23),
            minutes=rng.randint(0, 59),
            seconds=rng.randint(0, 59),
            microseconds=rng.randint(0, 999_999),
        )

    def calendar_date(self) -> date:
        return self.instant().date()

    def time_of_day(self) -> time:
        fields = self._datetime_fields()
        return time(fields["hour"], fields["minute"], fields["second"], fields["microsecond"])

    def identifier(self) -> uuid.UUID:
        return uuid.UUID(int=self.rng.getrandbits(128), version=4)


def _signed(bound: int) -> Callable[[Scalars], int]:
    return lambda s: s.signed(bound)


def _unsigned(bound: int) -> Callable[[Scalars], int]:
    return lambda s: s.unsigned(bound)


# Rule 2: primitives.  ``bool`` is looked up by identity, never as an ``int``.
PRIMITIVES: dict[Any, Callable[[Scalars], Any]] = {
    str: Scalars.text,
    bool: Scalars.boolean,
    Decimal: Scalars.decimal,
    Char: Scalars.char,
    bytes: Scalars.bytes_,
    float: Scalars.float64,
    Float64: Scalars.float64,
    Float32: Scalars.float32,
    **{tp: _signed(bound) for tp, bound in _SIGNED_MAX.items()},
    **{tp: _unsigned(bound) for tp, bound in _UNSIGNED_MAX.items()},
}

# Rule 4: time and identifiers.
TEMPORALS: dict[Any, Callable[[Scalars], Any]] = {
    datetime: Scalars.instant,
    ZonedDateTime: Scalars.zoned_instant,
    timedelta: Scalars.duration,
    date: Scalars.calendar_date,
    time: Scalars.time_of_day,
    uuid.UUID: Scalars.identifier,
}


__all__ = ["ALPHABET", "PRIMITIVES", "TEMPORALS", "Scalars"]
