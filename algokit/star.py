"""Check whether an adjacency matrix describes a star graph."""

from __future__ import annotations

from collections.abc import Sequence


def is_star(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if ``matrix`` is the adjacency matrix of a star graph.

    A star on n > 2 vertices has one centre of degree n - 1 and n - 1
    leaves of degree 1.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")

    if size == 1:
        return matrix[0][0] == 0
    if size == 2:
        return (
            matrix[0][0] == 0
            and matrix[0][1] == 1
            and matrix[1][0] == 1
            and matrix[1][1] == 0
        )

    degrees = [sum(1 for cell in row if cell) for row in matrix]
    leaves = degrees.count(1)
    centres = degrees.count(size - 1)
    return leaves == size - 1 and centres == 1