"""Traversals, topological sorts and strongly connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]


def _postorder(adj: Adjacency, start: int, visited: list[bool], out: list[int]) -> None:
    visited[start] = True
    stack = [(start, iter(adj[start]))]
    while stack:
        u, neighbours = stack[-1]
        for v in neighbours:
            if not visited[v]:
                visited[v] = True
                stack.append((v, iter(adj[v])))
                break
        else:
            stack.pop()
            out.append(u)


def _preorder(adj: Adjacency, start: int, visited: list[bool], out: list[int]) -> None:
    visited[start] = True
    out.append(start)
    stack = [iter(adj[start])]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                out.append(v)
                stack.append(iter(adj[v]))
                break
        else:
            stack.pop()


def _finish_order(adj: Adjacency) -> list[int]:
    visited = [False] * len(adj)
    order: list[int] = []
    for u in range(len(adj)):
        if not visited[u]:
            _postorder(adj, u, visited, order)
    return order


def topo_sort_dfs(adj: Adjacency) -> list[int]:
    """Topological order by reversed DFS finishing times."""
    return _finish_order(adj)[::-1]


def topo_sort_bfs(adj: Adjacency) -> list[int]:
    """Kahn's algorithm; on a cyclic graph the vertices on cycles are left out."""
    in_degree = [0] * len(adj)
    for neighbours in adj:
        for v in neighbours:
            in_degree[v] += 1
    queue = deque(u for u, d in enumerate(in_degree) if d == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)
    return order


def transpose(adj: Adjacency) -> list[list[int]]:
    """The graph with every edge reversed."""
    reversed_adj: list[list[int]] = [[] for _ in adj]
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            reversed_adj[v].append(u)
    return reversed_adj


def strongly_connected_components(adj: Adjacency) -> list[list[int]]:
    """Kosaraju's algorithm; components come in topological order."""
    order = _finish_order(adj)
    reversed_adj = transpose(adj)
    visited = [False] * len(adj)
    components: list[list[int]] = []
    for u in reversed(order):
        if not visited[u]:
            component: list[int] = []
            _preorder(reversed_adj, u, visited, component)
            components.append(component)
    return components


def dfs(adj: Adjacency, start: int) -> list[int]:
    """Vertices reachable from ``start`` in depth-first preorder."""
    order: list[int] = []
    _preorder(adj, start, [False] * len(adj), order)
    return order


def bfs(adj: Adjacency, start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    visited = [False] * len(adj)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            if not visited[v]:
                visited[v] = True
                queue.append(v)
    return order