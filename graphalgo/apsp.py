"""All-pairs shortest paths: Floyd-Warshall and min-plus matrix products."""

from __future__ import annotations

import math
from collections.abc import Sequence

Adjacency = Sequence[Sequence[tuple[int, float]]]
Matrix = list[list[float]]


def init_matrices(adj: Adjacency) -> tuple[Matrix, list[list[int | None]]]:
    """Build the weight matrix and the initial predecessor matrix."""
    n = len(adj)
    dist: Matrix = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    parent: list[list[int | None]] = [[None] * n for _ in range(n)]
    for i, neighbours in enumerate(adj):
        for j, w in neighbours:
            dist[i][j] = w
            parent[i][j] = i
    return dist, parent


def floyd_warshall(adj: Adjacency) -> tuple[Matrix, list[list[int | None]]]:
    """Return ``(dist, parent)``; ``parent[i][j]`` precedes ``j`` on the path from ``i``."""
    dist, parent = init_matrices(adj)
    n = len(dist)
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            row_i = dist[i]
            through = row_i[k]
            if through == math.inf:
                continue
            for j in range(n):
                if row_k[j] < math.inf and row_i[j] > through + row_k[j]:
                    row_i[j] = through + row_k[j]
                    parent[i][j] = parent[k][j]
    return dist, parent


def extend_shortest_paths(previous: Matrix, weights: Matrix) -> Matrix:
    """One min-plus product of ``previous`` and ``weights``."""
    n = len(previous)
    return [
        [
            min(
                (a + weights[k][j] for k, a in enumerate(row)
                 if a < math.inf and weights[k][j] < math.inf),
                default=math.inf,
            )
            for j in range(n)
        ]
        for row in previous
    ]


def matrix_multiplication(adj: Adjacency) -> Matrix:
    """Distances from ``n - 2`` successive extensions of the weight matrix."""
    weights, _ = init_matrices(adj)
    result = weights
    for _ in range(2, len(weights)):
        result = extend_shortest_paths(result, weights)
    return result


def matrix_multiplication_faster(adj: Adjacency) -> Matrix:
    """Distances by repeated squaring of the weight matrix."""
    dist, _ = init_matrices(adj)
    length = 1
    while length < len(dist):
        dist = extend_shortest_paths(dist, dist)
        length *= 2
    return dist


def format_matrix(matrix: Sequence[Sequence[float]], width: int = 3) -> str:
    """Render a matrix right-aligned, ``INF`` for missing paths, one row per line."""
    def cell(value: float) -> str:
        if value == math.inf:
            return f"{'INF':>{width}} "
        return f"{value:>{width}g} "

    return "".join("".join(cell(v) for v in row) + "\n" for row in matrix)