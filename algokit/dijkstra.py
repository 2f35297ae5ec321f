"""Single-source shortest paths on graphs with non-negative weights."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def dijkstra(adjacency: Sequence[Sequence[tuple[int, int]]], source: int) -> list[float]:
    """Return the distance from ``source`` to every node.

    ``adjacency[u]`` holds ``(v, weight)`` pairs for the directed edges
    leaving ``u``. Unreachable nodes get ``math.inf``.
    """
    n = len(adjacency)
    if not 0 <= source < n:
        raise IndexError(f"source node {source} is outside the graph")
    distances: list[float] = [math.inf] * n
    distances[source] = 0
    done = [False] * n
    heap = [(0, source)]
    while heap:
        _, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for neigh, weight in adjacency[node]:
            candidate = distances[node] + weight
            if candidate < distances[neigh]:
                distances[neigh] = candidate
                heapq.heappush(heap, (candidate, neigh))
    return distances