"""Minimum spanning tree (or forest) with Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between ``u`` and ``v``."""

    u: int
    v: int
    weight: int

    def __str__(self) -> str:
        return f"{self.u} - {self.v} : {self.weight}"


def _find(parent: list[int], node: int) -> int:
    while parent[node] != node:
        node = parent[node]
    return node


def kruskal(node_count: int, edges: Iterable[Edge | tuple[int, int, int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first.

    Edges are taken by weight, ties broken by ``u`` then ``v``. ``edges``
    may hold :class:`Edge` objects or ``(u, v, weight)`` tuples.
    """
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    normalised = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    for e in normalised:
        if not (0 <= e.u < node_count and 0 <= e.v < node_count):
            raise ValueError(f"edge {e} refers to a node outside 0..{node_count - 1}")

    parent = list(range(node_count))
    tree: list[Edge] = []
    for edge in sorted(normalised, key=lambda e: (e.weight, e.u, e.v)):
        root_u = _find(parent, edge.u)
        root_v = _find(parent, edge.v)
        if root_u != root_v:
            tree.append(edge)
            parent[root_u] = root_v
    return tree