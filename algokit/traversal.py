"""Breadth-first and depth-first traversal of undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def build_undirected(node_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build adjacency lists for ``node_count`` nodes joined by ``edges``."""
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    graph: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 0..{node_count - 1}")
        graph[u].append(v)
        graph[v].append(u)
    return graph


def bfs(graph: Sequence[Sequence[int]], source: int, visited: set[int] | None = None) -> list[int]:
    """Return nodes in breadth-first order from ``source``.

    ``visited`` is updated in place; nodes already in it are not entered.
    """
    seen = set() if visited is None else visited
    order: list[int] = []
    queue = deque([source])
    seen.add(source)
    while queue:
        current = queue.popleft()
        order.append(current)
        for neigh in graph[current]:
            if neigh not in seen:
                seen.add(neigh)
                queue.append(neigh)
    return order


def dfs(graph: Sequence[Sequence[int]], source: int, visited: set[int] | None = None) -> list[int]:
    """Return nodes in depth-first (preorder) order from ``source``.

    ``visited`` is updated in place; nodes already in it are not entered.
    """
    seen = set() if visited is None else visited
    order = [source]
    seen.add(source)
    stack = [iter(graph[source])]
    while stack:
        for neigh in stack[-1]:
            if neigh not in seen:
                seen.add(neigh)
                order.append(neigh)
                stack.append(iter(graph[neigh]))
                break
        else:
            stack.pop()
    return order


def bfs_all(graph: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order over every component, starting each at its lowest node."""
    visited: set[int] = set()
    order: list[int] = []
    for node in range(len(graph)):
        if node not in visited:
            order.extend(bfs(graph, node, visited))
    return order


def dfs_all(graph: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first order over every component, starting each at its lowest node."""
    visited: set[int] = set()
    order: list[int] = []
    for node in range(len(graph)):
        if node not in visited:
            order.extend(dfs(graph, node, visited))
    return order


def bfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return breadth-first order from ``start`` over an adjacency matrix."""
    size = len(matrix)
    if not 0 <= start < size:
        raise IndexError(f"start node {start} is outside the matrix")
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for j, connected in enumerate(matrix[node]):
            if connected and j not in visited:
                visited.add(j)
                order.append(j)
                queue.append(j)
    return order