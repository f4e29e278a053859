import pytest

from graphalgo.dsu import DisjointSet
from graphalgo.mst import Edge, format_edges, kruskal, prim, total_cost

SAMPLE = [
    (0, 1, 14), (0, 2, 21), (0, 3, 5), (0, 5, 7), (1, 6, 19), (1, 5, 2),
    (1, 2, 15), (2, 4, 4), (2, 6, 3), (3, 4, 22), (4, 5, 15), (5, 6, 18),
    (6, 4, 2),
]


def undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def spans(n, edges):
    ds = DisjointSet(n)
    for e in edges:
        ds.union(e.source, e.target)
    return all(not ds.differ(0, v) for v in range(n))


def test_sample_cost():
    adj = undirected(7, SAMPLE)
    assert total_cost(kruskal(adj)) == 34
    assert total_cost(prim(adj, 0)) == 34


@pytest.mark.parametrize("algorithm", [kruskal, lambda adj: prim(adj, 0)])
def test_tree_spans_graph(algorithm):
    adj = undirected(7, SAMPLE)
    tree = algorithm(adj)
    assert len(tree) == 6
    assert spans(7, tree)


def test_prim_from_any_start_has_same_cost():
    adj = undirected(7, SAMPLE)
    costs = {total_cost(prim(adj, s)) for s in range(7)}
    assert costs == {total_cost(kruskal(adj))}


def test_prim_edges_exist_in_graph():
    adj = undirected(7, SAMPLE)
    for e in prim(adj, 3):
        assert (e.target, e.weight) in adj[e.source]


def test_kruskal_picks_in_weight_order():
    tree = kruskal(undirected(7, SAMPLE))
    weights = [e.weight for e in tree]
    assert weights == sorted(weights)


def test_disconnected_graph_gives_forest():
    adj = undirected(4, [(0, 1, 1.0), (2, 3, 2.0)])
    assert len(kruskal(adj)) == 2
    assert len(prim(adj, 0)) == 1


def test_edge_orders_by_weight():
    assert Edge(5, 6, 1.0) < Edge(0, 1, 2.0)
    assert not Edge(0, 1, 2.0) < Edge(5, 6, 1.0)


def test_format_edges():
    assert format_edges([Edge(0, 3, 5), Edge(1, 5, 2)]) == "{(0,3),(1,5)}"
    assert format_edges([]) == "{}"


def test_total_cost_empty():
    assert total_cost([]) == 0