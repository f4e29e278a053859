"""Dijkstra's algorithm driven by an addressable priority queue."""

from __future__ import annotations

import math
from collections.abc import Sequence

from graphalgo.heaps import PriorityQueue

Adjacency = Sequence[Sequence[tuple[int, float]]]


def dijkstra_with_queue(
    adj: Adjacency, source: int, queue: PriorityQueue
) -> tuple[list[float], list[int | None]]:
    """Dijkstra with every vertex queued up front and keys lowered in place.

    ``queue`` must be empty and able to hold identifiers ``0 .. n-1``.
    Returns ``(dist, parent)``; unreachable vertices keep ``inf`` and ``None``.
    """
    n = len(adj)
    dist = [math.inf] * n
    parent: list[int | None] = [None] * n
    dist[source] = 0
    for v in range(n):
        queue.push(v, dist[v], v)
    while len(queue):
        u = queue.pop()
        if dist[u] == math.inf:
            continue
        for v, w in adj[u]:
            if v in queue and dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                parent[v] = u
                queue.decrease_key(v, dist[v])
    return dist, parent


def dijkstra_lazy(
    adj: Adjacency, source: int, queue: PriorityQueue
) -> tuple[list[float], list[int | None]]:
    """Dijkstra that pushes a fresh entry on every improvement and skips stale ones."""
    n = len(adj)
    dist = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    dist[source] = 0
    queue.push(source, dist[source], source)
    for _ in range(n):
        while True:
            if not len(queue):
                return dist, parent
            u = queue.pop()
            if not visited[u]:
                break
        visited[u] = True
        for v, w in adj[u]:
            if not visited[v] and dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                parent[v] = u
                queue.push(v, dist[v], v)
    return dist, parent


def path_length(parent: Sequence[int | None], target: int) -> int:
    """Number of edges on the parent chain from ``target`` back to its root."""
    length = 0
    while (up := parent[target]) is not None:
        length += 1
        target = up
    return length