import math

import pytest

from graphalgo.maxflow import FlowResult, max_bipartite_matching, max_flow, merge_edges


def _cut_capacity(adj, side):
    return sum(
        capacity
        for u, neighbours in enumerate(adj)
        if u in side
        for v, capacity in neighbours
        if v not in side
    )


def _flows(adj, result):
    return {(u, v): result.residual[v][u] for u, nb in enumerate(adj) for v, _ in nb}


DIAMOND = [
    [(1, 3), (2, 2)],
    [(3, 2), (2, 1)],
    [(3, 3)],
    [],
]


def test_diamond_flow_value():
    result = max_flow(DIAMOND, 0, 3)
    assert isinstance(result, FlowResult)
    assert result.value == 5


def test_max_flow_equals_min_cut():
    result = max_flow(DIAMOND, 0, 3)
    assert 0 in result.reachable
    assert 3 not in result.reachable
    assert result.value == _cut_capacity(DIAMOND, result.reachable)


def test_flow_conservation_and_capacity():
    adj = [
        [(1, 16), (2, 13)],
        [(3, 12)],
        [(1, 4), (4, 14)],
        [(2, 9), (5, 20)],
        [(3, 7), (5, 4)],
        [],
    ]
    result = max_flow(adj, 0, 5)
    flows = _flows(adj, result)
    for (u, v), f in flows.items():
        capacity = dict(adj[u])[v]
        assert 0 <= f <= capacity
    for node in range(1, 5):
        inflow = sum(f for (u, v), f in flows.items() if v == node)
        outflow = sum(f for (u, v), f in flows.items() if u == node)
        assert inflow == outflow
    out_of_source = sum(f for (u, _), f in flows.items() if u == 0)
    assert out_of_source == result.value
    assert result.value == _cut_capacity(adj, result.reachable)


def test_unreachable_sink_gives_zero():
    adj = [[(1, 5)], [], [(1, 2)]]
    result = max_flow(adj, 0, 2)
    assert result.value == 0
    assert result.reachable == frozenset({0, 1})


def test_source_equals_sink_gives_zero():
    result = max_flow(DIAMOND, 0, 0)
    assert result.value == 0


def test_infinite_middle_edges_are_fine():
    adj = [[(1, 4)], [(2, math.inf)], [(3, 3)], []]
    result = max_flow(adj, 0, 3)
    assert result.value == 3


def test_unbounded_path_raises():
    adj = [[(1, math.inf)], []]
    with pytest.raises(ValueError):
        max_flow(adj, 0, 1)


def test_repeated_pair_keeps_last_capacity():
    adj = [[(1, 3), (1, 7)], []]
    assert max_flow(adj, 0, 1).value == 7


def test_identity_matching_is_perfect():
    graph = [[i == j for j in range(4)] for i in range(4)]
    assert max_bipartite_matching(graph) == 4


def test_complete_bipartite_matching_is_smaller_side():
    graph = [[True, True] for _ in range(3)]
    assert max_bipartite_matching(graph) == 2


def test_empty_matching():
    assert max_bipartite_matching([[False, False], [False, False]]) == 0
    assert max_bipartite_matching([]) == 0


def test_matching_with_contention():
    graph = [
        [True, False, False],
        [True, False, False],
        [False, True, True],
    ]
    assert max_bipartite_matching(graph) == 2


def test_merge_parallel_edges():
    adj = merge_edges(2, [(0, 1, 3), (0, 1, 4)])
    assert adj == [[(1, 7)], []]


def test_merge_antiparallel_edges_adds_vertex():
    adj = merge_edges(2, [(0, 1, 3), (1, 0, 2)])
    assert adj == [[(1, 3)], [(2, 2)], [(0, 2)]]


def test_merge_routed_edges_accumulate():
    adj = merge_edges(2, [(0, 1, 3), (1, 0, 2), (1, 0, 5)])
    assert adj == [[(1, 3)], [(2, 7)], [(0, 7)]]


def test_merged_network_flow_adds_parallel_capacity():
    edges = [(0, 1, 2), (0, 1, 2), (1, 2, 10), (2, 1, 1)]
    adj = merge_edges(3, edges)
    assert len(adj) == 4
    assert max_flow(adj, 0, 2).value == 4