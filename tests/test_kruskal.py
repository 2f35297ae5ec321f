import pytest

from algokit.kruskal import Edge, kruskal

CLASSIC = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2), (2, 5, 4),
    (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]


def _connects_all(n, tree):
    parent = list(range(n))

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for e in tree:
        a, b = find(e.u), find(e.v)
        if a == b:
            return False
        parent[a] = b
    return len({find(i) for i in range(n)}) == 1


def test_classic_graph_total_weight():
    tree = kruskal(9, CLASSIC)
    assert sum(e.weight for e in tree) == 37


def test_tree_spans_without_cycles():
    tree = kruskal(9, CLASSIC)
    assert len(tree) == 8
    assert _connects_all(9, tree)


def test_tree_edges_come_from_input_in_weight_order():
    tree = kruskal(9, CLASSIC)
    given = {Edge(*e) for e in CLASSIC}
    assert set(tree) <= given
    weights = [e.weight for e in tree]
    assert weights == sorted(weights)


def test_tree_input_is_returned_whole():
    edges = [Edge(0, 1, 5), Edge(1, 2, 3), Edge(1, 3, 9)]
    tree = kruskal(4, edges)
    assert sorted(tree, key=lambda e: e.weight) == sorted(edges, key=lambda e: e.weight)


def test_heaviest_edge_of_cycle_is_dropped():
    edges = [(0, 1, 1), (1, 2, 2), (2, 0, 3)]
    tree = kruskal(3, edges)
    assert Edge(2, 0, 3) not in tree
    assert len(tree) == 2


def test_disconnected_graph_gives_forest():
    edges = [(0, 1, 1), (2, 3, 1), (3, 4, 2)]
    tree = kruskal(6, edges)
    assert len(tree) == 6 - 3


def test_edge_str_format():
    assert str(Edge(0, 1, 4)) == "0 - 1 : 4"


def test_out_of_range_edge_rejected():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 2, 1)])


def test_negative_node_count_rejected():
    with pytest.raises(ValueError):
        kruskal(-1, [])