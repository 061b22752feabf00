"""Immutable recursion depth counter.

Depth grows by one at every new composite instance (not at scalars or
container elements).  Guards are passed by value: siblings each receive the
same guard and never observe each other's descent.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from contractgen.utils.errors import UnsupportedTypeError


@dataclass(frozen=True, slots=True)
class RecursionGuard:
    """Depth of the current node and the configured limit.

    ``overflow`` lists the composite types whose construction arguments are
    being synthesized past the limit.  Meeting one of them again means the
    type graph cannot be closed by construction alone.
    """

    depth: int
    limit: int
    overflow: tuple[Any, ...] = ()

    @classmethod
    def root(cls, limit: int) -> "RecursionGuard":
        return cls(depth=0, limit=limit)

    @property
    def exhausted(self) -> bool:
        """Return ``True`` once properties must no longer be filled."""

        return self.depth >= self.limit

    def descend(self) -> "RecursionGuard":
        """Return the guard for the children of a new composite node."""

        return replace(self, depth=self.depth + 1)

    def constructing(self, tp: Any) -> "RecursionGuard":
        """Record ``tp`` as being built past the limit.

        Raises
        ------
        UnsupportedTypeError
            If ``tp`` is already being built further up the same chain.
        """

        if not self.exhausted:
            return self
        if tp in self.overflow:
            raise UnsupportedTypeError(
                tp, f"constructor arguments recurse beyond depth {self.limit}"
            )
        return replace(self, overflow=self.overflow + (tp,))


__all__ = ["RecursionGuard"]
