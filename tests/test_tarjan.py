import pytest

from algokit.tarjan import DirectedGraph


def _graph(n, edges):
    g = DirectedGraph(n)
    for v, w in edges:
        g.add_edge(v, w)
    return g


def _reachable(edges, n, start):
    adj = {i: [] for i in range(n)}
    for v, w in edges:
        adj[v].append(w)
    seen, todo = {start}, [start]
    while todo:
        for nxt in adj[todo.pop()]:
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return seen


FOURTH_EDGES = [
    (0, 1), (0, 3), (1, 2), (1, 4), (2, 0), (2, 6), (3, 2), (4, 5), (4, 6),
    (5, 6), (5, 7), (5, 8), (5, 9), (6, 4), (7, 9), (8, 9), (9, 8),
]


def test_first_source_graph():
    g = _graph(5, [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)])
    assert g.strongly_connected_components() == [[4], [3], [1, 2, 0]]


def test_second_source_graph_chain():
    g = _graph(4, [(0, 1), (1, 2), (2, 3)])
    assert g.strongly_connected_components() == [[3], [2], [1], [0]]


def test_fifth_source_graph():
    g = _graph(5, [(0, 1), (1, 2), (2, 3), (2, 4), (3, 0), (4, 2)])
    assert g.strongly_connected_components() == [[4, 3, 2, 1, 0]]


def test_components_partition_vertices():
    g = _graph(11, FOURTH_EDGES)
    components = g.strongly_connected_components()
    flat = [v for comp in components for v in comp]
    assert sorted(flat) == list(range(11))


def test_components_are_mutually_reachable_and_maximal():
    g = _graph(11, FOURTH_EDGES)
    components = g.strongly_connected_components()
    reach = {v: _reachable(FOURTH_EDGES, 11, v) for v in range(11)}
    member = {v: i for i, comp in enumerate(components) for v in comp}
    for a in range(11):
        for b in range(11):
            same = a in reach[b] and b in reach[a]
            assert same == (member[a] == member[b])


def test_cycle_is_single_component():
    n = 6
    g = _graph(n, [(i, (i + 1) % n) for i in range(n)])
    components = g.strongly_connected_components()
    assert len(components) == 1
    assert sorted(components[0]) == list(range(n))


def test_dag_gives_singletons():
    edges = [(0, 1), (0, 2), (1, 3), (2, 3)]
    components = _graph(4, edges).strongly_connected_components()
    assert all(len(c) == 1 for c in components)
    assert sorted(c[0] for c in components) == list(range(4))


def test_long_chain_does_not_overflow_recursion():
    n = 5000
    g = _graph(n, [(i, i + 1) for i in range(n - 1)] + [(n - 1, 0)])
    components = g.strongly_connected_components()
    assert len(components) == 1
    assert len(components[0]) == n


def test_add_edge_rejects_unknown_vertex():
    g = DirectedGraph(3)
    with pytest.raises(IndexError):
        g.add_edge(0, 3)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        DirectedGraph(-2)