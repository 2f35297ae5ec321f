"""Linear and binary search returning 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Find ``key`` in ascending ``items``; return its 1-based position or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            return mid + 1
        if items[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Iterable[Any], key: Any) -> int | None:
    """Return the 1-based position of the first ``key`` in ``items``, or None."""
    return next((pos for pos, value in enumerate(items, start=1) if value == key), None)