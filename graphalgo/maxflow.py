"""Maximum flow with the Edmonds-Karp algorithm, and problems reduced to it."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

FlowAdjacency = Sequence[Sequence[tuple[int, float]]]


@dataclass(frozen=True)
class FlowResult:
    """Outcome of a max-flow run.

    ``residual[u][v]`` is the capacity left on ``u -> v`` once the flow is
    pushed; for an original edge ``u -> v`` the flow it carries shows up as
    ``residual[v][u]``. ``reachable`` is the source side of a minimum cut.
    """

    value: float
    residual: list[dict[int, float]]
    reachable: frozenset[int]


def _augmenting_path(
    residual: list[dict[int, float]], source: int, sink: int
) -> tuple[dict[int, int | None], float] | None:
    parent: dict[int, int | None] = {source: None}
    queue: deque[tuple[int, float]] = deque([(source, math.inf)])
    while queue:
        u, flow = queue.popleft()
        for v, capacity in residual[u].items():
            if v not in parent and capacity > 0:
                parent[v] = u
                bottleneck = min(flow, capacity)
                if v == sink:
                    return parent, bottleneck
                queue.append((v, bottleneck))
    return None


def _reachable(residual: list[dict[int, float]], source: int) -> frozenset[int]:
    seen = {source}
    stack = [source]
    while stack:
        u = stack.pop()
        for v, capacity in residual[u].items():
            if v not in seen and capacity > 0:
                seen.add(v)
                stack.append(v)
    return frozenset(seen)


def max_flow(adj: FlowAdjacency, source: int, sink: int) -> FlowResult:
    """Maximum flow from ``source`` to ``sink``.

    ``adj[u]`` lists ``(v, capacity)`` pairs. A repeated ``u -> v`` pair keeps
    only its last capacity; use :func:`merge_edges` to add parallel edges up.
    """
    residual: list[dict[int, float]] = [{} for _ in adj]
    for u, neighbours in enumerate(adj):
        for v, capacity in neighbours:
            residual[u][v] = capacity
            residual[v].setdefault(u, 0)

    value: float = 0
    while (found := _augmenting_path(residual, source, sink)) is not None:
        parent, bottleneck = found
        if bottleneck == math.inf:
            raise ValueError("the flow network has an unbounded path")
        value += bottleneck
        current = sink
        while (previous := parent[current]) is not None:
            residual[previous][current] -= bottleneck
            residual[current][previous] += bottleneck
            current = previous
    return FlowResult(value, residual, _reachable(residual, source))


def max_bipartite_matching(bp_graph: Sequence[Sequence[bool]]) -> int:
    """Size of a maximum matching; ``bp_graph[u][v]`` marks an allowed pair."""
    left = len(bp_graph)
    right = len(bp_graph[0]) if left else 0
    size = left + right + 2
    source, sink = size - 2, size - 1
    adj: list[list[tuple[int, int]]] = [[] for _ in range(size)]
    for u, row in enumerate(bp_graph):
        adj[u].extend((left + v, 1) for v, allowed in enumerate(row) if allowed)
    adj[source].extend((u, 1) for u in range(left))
    for v in range(right):
        adj[left + v].append((sink, 1))
    return int(max_flow(adj, source, sink).value)


def merge_edges(
    n: int, edges: Iterable[tuple[int, int, float]]
) -> list[list[tuple[int, float]]]:
    """Build a flow network on vertices ``0 .. n-1`` from a list of edges.

    Repeated edges have their capacities added up. An edge whose reverse is
    already present is routed through a fresh vertex numbered ``n`` or above,
    so that no two vertices are joined in both directions.
    """
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    direct: dict[tuple[int, int], int] = {}
    routed: dict[tuple[int, int], int] = {}
    for u, v, w in edges:
        if (u, v) in direct:
            index = direct[u, v]
            target, capacity = adj[u][index]
            adj[u][index] = (target, capacity + w)
        elif (u, v) in routed:
            middle = routed[u, v]
            for i, (target, capacity) in enumerate(adj[u]):
                if target == middle:
                    adj[u][i] = (target, capacity + w)
            target, capacity = adj[middle][0]
            adj[middle][0] = (target, capacity + w)
        elif (v, u) in direct:
            middle = len(adj)
            adj.append([(v, w)])
            adj[u].append((middle, w))
            routed[u, v] = middle
        else:
            direct[u, v] = len(adj[u])
            adj[u].append((v, w))
    return adj