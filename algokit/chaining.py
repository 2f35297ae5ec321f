"""Hash table with separate chaining into sorted buckets."""

from __future__ import annotations

from bisect import bisect_left, insort_left


class ChainedHashTable:
    """A hash table of integer keys; bucket ``key % buckets`` keeps its keys sorted."""

    def __init__(self, buckets: int = 10) -> None:
        if buckets <= 0:
            raise ValueError("buckets must be positive")
        self.buckets = buckets
        self._chains: list[list[int]] = [[] for _ in range(buckets)]

    def _bucket(self, key: int) -> int:
        return key % self.buckets

    def insert(self, key: int) -> None:
        """Add ``key`` to its bucket, keeping the bucket in ascending order."""
        insort_left(self._chains[self._bucket(key)], key)

    def search(self, key: int) -> int | None:
        """Return the bucket holding ``key``, or None if it is not stored."""
        index = self._bucket(key)
        chain = self._chains[index]
        pos = bisect_left(chain, key)
        return index if pos < len(chain) and chain[pos] == key else None

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``."""
        chain = self._chains[self._bucket(key)]
        pos = bisect_left(chain, key)
        if pos == len(chain) or chain[pos] != key:
            raise KeyError(key)
        del chain[pos]

    def chain(self, index: int) -> list[int]:
        """Return a copy of the keys in bucket ``index``, in ascending order."""
        if not 0 <= index < self.buckets:
            raise IndexError(f"bucket {index} is outside 0..{self.buckets - 1}")
        return list(self._chains[index])

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None