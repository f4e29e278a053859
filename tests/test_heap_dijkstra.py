import math

import pytest

from graphalgo.fibheap import FibonacciHeapQueue
from graphalgo.heap_dijkstra import dijkstra_lazy, dijkstra_with_queue, path_length
from graphalgo.heaps import BinaryHeapQueue, HeapError
from graphalgo.sssp import dijkstra

EDGES = [
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


QUEUES = [BinaryHeapQueue, FibonacciHeapQueue]
ALGORITHMS = [dijkstra_with_queue, dijkstra_lazy]


@pytest.mark.parametrize("queue_type", QUEUES)
@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("source", range(7))
def test_distances_agree_with_plain_dijkstra(queue_type, algorithm, source):
    adj = undirected(7, EDGES)
    dist, _ = algorithm(adj, source, queue_type(7))
    expected, _ = dijkstra(adj, source)
    assert dist == expected


def _assert_shortest_path_tree(adj, dist, parent):
    assert parent[0] is None
    assert dist[0] == 0
    for v in range(1, len(adj)):
        p = parent[v]
        assert p is not None
        assert any(t == v and dist[p] + w == dist[v] for t, w in adj[p])


@pytest.mark.parametrize("queue_type", QUEUES)
def test_parents_form_shortest_path_tree(queue_type):
    adj = undirected(7, EDGES)
    expected, _ = dijkstra(adj, 0)

    dist, parent = dijkstra_with_queue(adj, 0, queue_type(7))
    assert dist == expected
    _assert_shortest_path_tree(adj, dist, parent)

    dist, parent = dijkstra_lazy(adj, 0, queue_type(7))
    assert dist == expected
    _assert_shortest_path_tree(adj, dist, parent)


@pytest.mark.parametrize("queue_type", QUEUES)
def test_unreachable_vertex(queue_type):
    adj = [[(1, 3)], [(0, 3)], []]

    dist, parent = dijkstra_with_queue(adj, 0, queue_type(3))
    assert dist[:2] == [0, 3]
    assert dist[2] == math.inf
    assert parent == [None, 0, None]

    dist, parent = dijkstra_lazy(adj, 0, queue_type(3))
    assert dist[:2] == [0, 3]
    assert dist[2] == math.inf
    assert parent == [None, 0, None]


@pytest.mark.parametrize("queue_type", QUEUES)
def test_queue_too_small_raises(queue_type):
    adj = [[(1, 1)], [(2, 1)], []]
    with pytest.raises(HeapError):
        dijkstra_with_queue(adj, 0, queue_type(2))
    with pytest.raises(HeapError):
        dijkstra_lazy(adj, 0, queue_type(2))


def test_path_length_counts_edges():
    parent = [None, 0, 1, None]
    assert path_length(parent, 2) == 2
    assert path_length(parent, 1) == 1
    assert path_length(parent, 0) == 0
    assert path_length(parent, 3) == 0


@pytest.mark.parametrize("queue_type", QUEUES)
def test_path_length_matches_tree_depth(queue_type):
    adj = [[(1, 1)], [(0, 1), (2, 1)], [(1, 1), (3, 1)], [(2, 1)]]
    _, parent = dijkstra_with_queue(adj, 0, queue_type(4))
    assert [path_length(parent, v) for v in range(4)] == [0, 1, 2, 3]