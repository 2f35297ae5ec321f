"""Fixed-size hash tables with open addressing and rehash-on-delete."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class Probing(Enum):
    """How the next slot is chosen after a collision."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    DOUBLE = "double"


class OpenAddressingTable:
    """A hash table of integer keys stored directly in ``size`` slots.

    The primary hash is ``key % size``. Double hashing steps by
    ``prime - key % prime``. Deleting a key clears the table and inserts
    the remaining keys again, in slot order, so no tombstones are kept.
    """

    def __init__(self, probing: Probing = Probing.LINEAR, size: int = 10, prime: int = 7) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        if prime <= 0:
            raise ValueError("prime must be positive")
        self.probing = Probing(probing)
        self.size = size
        self.prime = prime
        self._slots: list[int | None] = [None] * size

    def _step(self, key: int) -> int:
        return self.prime - key % self.prime

    def _probe_sequence(self, key: int) -> Iterator[int]:
        """Yield every slot the probing scheme can reach for ``key``, in order."""
        home = key % self.size
        step = self._step(key) if self.probing is Probing.DOUBLE else 0
        for i in range(self.size):
            if self.probing is Probing.LINEAR:
                offset = i
            elif self.probing is Probing.QUADRATIC:
                offset = i * i
            else:
                offset = i * step
            yield (home + offset) % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot of its probe sequence; return that slot."""
        for index in self._probe_sequence(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise OverflowError(f"no free slot reachable for key {key}")

    def search(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is not stored."""
        return next(
            (index for index in self._probe_sequence(key) if self._slots[index] == key),
            None,
        )

    def delete(self, key: int) -> None:
        """Remove ``key`` and rehash the keys that remain."""
        index = self.search(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = None
        remaining = [k for k in self._slots if k is not None]
        self._slots = [None] * self.size
        for k in remaining:
            self.insert(k)

    def slots(self) -> list[int | None]:
        """Return a copy of the slot array, with None for empty slots."""
        return list(self._slots)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None