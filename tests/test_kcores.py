from graphwalk.graph import Graph
from graphwalk.kcores import format_k_cores, k_cores

_GRAPH_ONE_EDGES = [
    (0, 1), (0, 2), (1, 2), (1, 5), (2, 3), (2, 4), (2, 5), (2, 6), (3, 4),
    (3, 6), (3, 7), (4, 6), (4, 7), (5, 6), (5, 8), (6, 7), (6, 8),
]

_GRAPH_TWO_EDGES = [
    (0, 1), (0, 2), (0, 3), (1, 4), (1, 5), (1, 6), (2, 7), (2, 8), (2, 9),
    (3, 10), (3, 11), (3, 12),
]


def _build(n, edges):
    g = Graph(n, directed=False)
    for u, v in edges:
        g.add_edge(u, v)
    return g


def test_graph_one_core_vertices():
    cores = k_cores(_build(9, _GRAPH_ONE_EDGES), 3)
    assert sorted(cores) == [2, 3, 4, 6, 7]


def test_graph_one_core_adjacency_keeps_order():
    cores = k_cores(_build(9, _GRAPH_ONE_EDGES), 3)
    assert cores[7] == [3, 4, 6]


def test_core_vertices_have_enough_core_neighbours():
    k = 3
    cores = k_cores(_build(9, _GRAPH_ONE_EDGES), k)
    for v, ns in cores.items():
        assert len(ns) >= k
        assert all(w in cores for w in ns)


def test_graph_two_has_no_three_core():
    assert k_cores(_build(13, _GRAPH_TWO_EDGES), 3) == {}


def test_zero_core_is_whole_graph():
    g = _build(4, [(0, 1), (1, 2)])
    cores = k_cores(g, 0)
    assert cores == {v: list(g.neighbors(v)) for v in range(4)}


def test_empty_graph():
    assert k_cores([], 2) == {}


def test_format_k_cores():
    assert format_k_cores({2: [3, 4], 3: [2]}) == "\n[2] -> 3 -> 4\n[3] -> 2"


def test_format_no_cores():
    assert format_k_cores({}) == ""