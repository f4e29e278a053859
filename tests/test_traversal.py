import pytest

from graphalgo.traversal import (
    bfs,
    dfs,
    strongly_connected_components,
    topo_sort_bfs,
    topo_sort_dfs,
    transpose,
)

DAG = [[1, 2], [3], [3, 4], [5], [5], [], [4]]
CYCLIC = [[1], [2], [0, 3], [4], [3]]


def respects_edges(adj, order):
    position = {v: i for i, v in enumerate(order)}
    return all(position[u] < position[v] for u, ns in enumerate(adj) for v in ns)


@pytest.mark.parametrize("sort", [topo_sort_dfs, topo_sort_bfs])
def test_topological_orders(sort):
    order = sort(DAG)
    assert sorted(order) == list(range(len(DAG)))
    assert respects_edges(DAG, order)


def test_kahn_leaves_out_cycles():
    order = topo_sort_bfs([[1], [2], [1], []])
    assert sorted(order) == [0, 3]


def test_transpose_twice_restores_edges():
    twice = transpose(transpose(DAG))
    assert [sorted(ns) for ns in twice] == [sorted(ns) for ns in DAG]


def test_transpose_reverses_each_edge():
    reversed_adj = transpose(DAG)
    for u, ns in enumerate(DAG):
        for v in ns:
            assert u in reversed_adj[v]


def test_scc_partition():
    components = strongly_connected_components(CYCLIC)
    assert {frozenset(c) for c in components} == {frozenset({0, 1, 2}), frozenset({3, 4})}
    assert set(components[0]) == {0, 1, 2}


def test_scc_of_dag_are_singletons_in_topological_order():
    components = strongly_connected_components(DAG)
    assert all(len(c) == 1 for c in components)
    assert respects_edges(DAG, [c[0] for c in components])


@pytest.mark.parametrize("walk", [dfs, bfs])
def test_walks_visit_reachable_once(walk):
    order = walk(CYCLIC, 3)
    assert order[0] == 3
    assert sorted(order) == [3, 4]
    full = walk(CYCLIC, 0)
    assert sorted(full) == list(range(5))


def test_bfs_visits_by_level():
    order = bfs(DAG, 0)
    assert order.index(1) < order.index(3)
    assert order.index(2) < order.index(5)
    assert order[:3] in ([0, 1, 2], [0, 2, 1])


def test_dfs_goes_deep_first():
    order = dfs([[1, 3], [2], [], []], 0)
    assert order == [0, 1, 2, 3]


def test_long_chain_does_not_recurse():
    n = 5000
    chain = [[v + 1] for v in range(n - 1)] + [[]]
    assert topo_sort_dfs(chain) == list(range(n))
    assert len(strongly_connected_components(chain)) == n