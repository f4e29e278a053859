"""Single-source shortest paths: Dijkstra and Bellman-Ford."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

Adjacency = Sequence[Sequence[tuple[int, float]]]


class NegativeCycleError(ValueError):
    """The graph holds a negative cycle reachable from the source."""


def dijkstra(adj: Adjacency, source: int) -> tuple[list[float], list[int | None]]:
    """Return ``(dist, parent)``; unreachable vertices have ``inf`` and ``None``."""
    n = len(adj)
    dist = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, -source)]
    for _ in range(n):
        while True:
            if not heap:
                return dist, parent
            _, neg_u = heapq.heappop(heap)
            u = -neg_u
            if not visited[u]:
                break
        visited[u] = True
        for v, w in adj[u]:
            if not visited[v] and dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                parent[v] = u
                heapq.heappush(heap, (dist[v], -v))
    return dist, parent


def bellman_ford(adj: Adjacency, source: int) -> tuple[list[float], list[int | None]]:
    """Return ``(dist, parent)``, raising NegativeCycleError on a negative cycle."""
    n = len(adj)
    dist = [math.inf] * n
    parent: list[int | None] = [None] * n
    dist[source] = 0
    for round_number in range(1, n + 1):
        for u, neighbours in enumerate(adj):
            if dist[u] == math.inf:
                continue
            for v, w in neighbours:
                if dist[u] + w < dist[v]:
                    if round_number == n:
                        raise NegativeCycleError("the graph contains a negative cycle")
                    dist[v] = dist[u] + w
                    parent[v] = u
    return dist, parent


def path_to(parent: Sequence[int | None], target: int) -> list[int]:
    """Follow ``parent`` links back from ``target``; the path runs root first."""
    path = [target]
    while (up := parent[path[-1]]) is not None:
        path.append(up)
    path.reverse()
    return path