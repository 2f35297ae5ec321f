"""Determinant by cofactor expansion along the first row."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _det(rows: list[list[Any]]) -> Any:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[1][0] * rows[0][1]
    total = 0
    for x, lead in enumerate(rows[0]):
        minor = [row[:x] + row[x + 1 :] for row in rows[1:]]
        sign = -1 if x % 2 else 1
        total += sign * lead * _det(minor)
    return total


def determinant(matrix: Sequence[Sequence[Any]]) -> Any:
    """Return the determinant of a non-empty square matrix."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("determinant requires a non-empty square matrix")
    return _det(rows)