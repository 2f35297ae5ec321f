"""Strongly connected components with Tarjan's algorithm."""

from __future__ import annotations


class DirectedGraph:
    """A directed graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is outside 0..{self.vertex_count - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge ``v -> w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def strongly_connected_components(self) -> list[list[int]]:
        """Return the components in the order they are completed.

        Each component lists its vertices in the order they leave the
        stack, so its root comes last.
        """
        n = self.vertex_count
        disc = [0] * n
        low = [0] * n
        on_stack = [False] * n
        stack: list[int] = []
        components: list[list[int]] = []
        time = 0

        def enter(vertex: int) -> None:
            nonlocal time
            time += 1
            disc[vertex] = low[vertex] = time
            stack.append(vertex)
            on_stack[vertex] = True

        for root in range(n):
            if disc[root]:
                continue
            enter(root)
            work = [(root, iter(self._adjacency[root]))]
            while work:
                u, neighbours = work[-1]
                for v in neighbours:
                    if not disc[v]:
                        enter(v)
                        work.append((v, iter(self._adjacency[v])))
                        break
                    if on_stack[v]:
                        low[u] = min(low[u], disc[v])
                else:
                    work.pop()
                    if work:
                        parent = work[-1][0]
                        low[parent] = min(low[parent], low[u])
                    if low[u] == disc[u]:
                        component: list[int] = []
                        while True:
                            w = stack.pop()
                            on_stack[w] = False
                            component.append(w)
                            if w == u:
                                break
                        components.append(component)
        return components