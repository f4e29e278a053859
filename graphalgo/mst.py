"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from graphalgo.dsu import DisjointSet

Adjacency = Sequence[Sequence[tuple[int, float]]]


@dataclass(frozen=True)
class Edge:
    """A weighted edge; edges order by weight."""

    source: int
    target: int
    weight: float

    def __lt__(self, other: "Edge") -> bool:
        return self.weight < other.weight


def kruskal(adj: Adjacency) -> list[Edge]:
    """Return the edges Kruskal's algorithm picks, in the order they are picked."""
    candidates = sorted(
        (Edge(u, v, w) for u, neighbours in enumerate(adj) for v, w in neighbours),
        key=attrgetter("weight"),
    )
    classes = DisjointSet(len(adj))
    chosen: list[Edge] = []
    for edge in candidates:
        if classes.differ(edge.source, edge.target):
            classes.union(edge.source, edge.target)
            chosen.append(edge)
    return chosen


def prim(adj: Adjacency, start: int = 0) -> list[Edge]:
    """Return the edges Prim's algorithm picks when grown from ``start``."""
    n = len(adj)
    parent: list[int | None] = [None] * n
    best = [math.inf] * n
    visited = [False] * n
    best[start] = 0
    # Ties on weight pop the larger vertex first.
    heap: list[tuple[float, int]] = [(0, -start)]
    chosen: list[Edge] = []
    for _ in range(n):
        while True:
            if not heap:
                return chosen
            weight, neg_u = heapq.heappop(heap)
            u = -neg_u
            if not visited[u]:
                break
        visited[u] = True
        if parent[u] is not None:
            chosen.append(Edge(parent[u], u, weight))
        for v, w in adj[u]:
            if not visited[v] and best[v] > w:
                best[v] = w
                parent[v] = u
                heapq.heappush(heap, (w, -v))
    return chosen


def total_cost(edges: Iterable[Edge]) -> float:
    """Sum of the weights of ``edges``."""
    return sum(edge.weight for edge in edges)


def format_edges(edges: Iterable[Edge]) -> str:
    """Render edges as ``{(u,v),(u,v),...}``."""
    return "{" + ",".join(f"({e.source},{e.target})" for e in edges) + "}"