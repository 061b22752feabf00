"""Seeding helpers for reproducible generation.

A :class:`SeedSource` owns the generator-wide random stream.  Every
``generate``/``fill`` call draws a fresh child :class:`random.Random` from it
under a lock, so the stream used while synthesizing a value is confined to a
single call and concurrent calls never interleave draws.

String seeds are hashed with BLAKE2b so that human friendly seeds such as
``"checkout-tests"`` map to stable integers across interpreter runs (the
builtin ``hash`` of a ``str`` is salted per process).

Randomness here is for test data only and carries no cryptographic guarantee.
"""

from __future__ import annotations

import hashlib
import random
import threading
from typing import Final

_NS_SEED: Final = b"contractgen/v1/seed"


def canonical_seed(seed: int | str | bytes | None) -> int | None:
    """Normalize ``seed`` to an integer (``None`` stays ``None``)."""

    if seed is None or isinstance(seed, int):
        return seed
    data = seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)
    digest = hashlib.blake2b(_NS_SEED + data, digest_size=16).digest()
    return int.from_bytes(digest, "big")


def rng_for(seed: int | str | bytes | None) -> random.Random:
    """Return a :class:`random.Random` seeded from ``seed``."""

    return random.Random(canonical_seed(seed))


class SeedSource:
    """Thread-safe parent stream handing out per-call generators."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | str | None = None) -> None:
        self._rng = rng if rng is not None else rng_for(seed)
        self._lock = threading.Lock()

    def spawn(self) -> random.Random:
        """Return a new generator seeded from the parent stream."""

        with self._lock:
            child_seed = self._rng.getrandbits(64)
        return random.Random(child_seed)


__all__ = ["SeedSource", "canonical_seed", "rng_for"]
