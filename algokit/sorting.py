"""Classic sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

_Partition = Callable[[MutableSequence[Any], int, int], int]


def _bubble_in_place(values: MutableSequence[Any]) -> int:
    """Bubble-sort ``values`` in place and return the number of swaps made."""
    swaps = 0
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swaps += 1
                swapped = True
        if not swapped:
            break
    return swaps


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    values = list(items)
    _bubble_in_place(values)
    return values


def count_bubble_swaps(items: Iterable[Any]) -> tuple[list[Any], int]:
    """Bubble-sort ``items`` and return the sorted list with the swap count."""
    values = list(items)
    swaps = _bubble_in_place(values)
    return values, swaps


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    values = list(items)
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each round."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition_counting(values: MutableSequence[Any], low: int, high: int) -> int:
    """Place the first element at its final spot by counting smaller elements."""
    pivot = values[low]
    pivot_index = low + sum(1 for v in values[low + 1 : high + 1] if v <= pivot)
    values[low], values[pivot_index] = values[pivot_index], values[low]

    i, j = low, high
    while i < pivot_index and j > pivot_index:
        while i < pivot_index and values[i] <= pivot:
            i += 1
        while j > pivot_index and values[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    return pivot_index


def _partition_hoare(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition around the first element with two converging scanners."""
    pivot = values[low]
    i, j = low + 1, high
    while True:
        while i <= high and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            break
        values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def _quick(values: MutableSequence[Any], low: int, high: int, partition: _Partition) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while low < high:
        p = partition(values, low, high)
        if p - low < high - p:
            _quick(values, low, p - 1, partition)
            low = p + 1
        else:
            _quick(values, p + 1, high, partition)
            high = p - 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort whose partition counts the elements not above the pivot."""
    values = list(items)
    _quick(values, 0, len(values) - 1, _partition_counting)
    return values


def quick_sort_hoare(items: Iterable[Any]) -> list[Any]:
    """Quicksort with a Hoare-style partition around the first element."""
    values = list(items)
    _quick(values, 0, len(values) - 1, _partition_hoare)
    return values


def count_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("count_sort requires non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]