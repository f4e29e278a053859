"""Command-line front end for the graph algorithms."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Callable, Iterator, Sequence

from graphalgo.apsp import (
    floyd_warshall,
    format_matrix,
    matrix_multiplication,
    matrix_multiplication_faster,
)
from graphalgo.fibheap import FibonacciHeapQueue
from graphalgo.heap_dijkstra import dijkstra_with_queue, path_length
from graphalgo.heaps import BinaryHeapQueue, PriorityQueue
from graphalgo.maxflow import max_flow
from graphalgo.mst import format_edges, kruskal, prim, total_cost
from graphalgo.sssp import NegativeCycleError, bellman_ford, dijkstra, path_to

DEFAULT_GENERATED_VERTICES = 8000
MAX_GENERATED_WEIGHT = 1_000_000_000


class _Tokens:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def _next(self) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ValueError("input ends too early") from None

    def int(self) -> int:
        return int(self._next())

    def float(self) -> float:
        return float(self._next())


def _read(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def generate_complete_graph(
    n: int, rng: random.Random | None = None
) -> list[tuple[int, int, int]]:
    """Every pair ``i < j`` of ``n`` vertices joined by a random-weight edge."""
    rng = rng or random.Random()
    return [
        (i, j, rng.randrange(MAX_GENERATED_WEIGHT))
        for i in range(n)
        for j in range(i + 1, n)
    ]


def _run_mst(args: argparse.Namespace) -> int:
    tokens = _Tokens(_read(args.path))
    n, m = tokens.int(), tokens.int()
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for _ in range(m):
        u, v, w = tokens.int(), tokens.int(), tokens.float()
        adj[u].append((v, w))
        adj[v].append((u, w))
    by_kruskal = kruskal(adj)
    by_prim = prim(adj, 0)
    if len(by_kruskal) < n - 1:
        print("ERROR: Disconnected graph", file=sys.stderr)
        return 1
    print(f"Cost of the minimum spanning tree : {total_cost(by_kruskal):g}")
    print(f"List of edges selected by Prim's: {format_edges(by_prim)}")
    print(f"List of edges selected by Kruskal's: {format_edges(by_kruskal)}")
    return 0


def _run_sssp(args: argparse.Namespace) -> int:
    tokens = _Tokens(_read(args.path))
    n, m = tokens.int(), tokens.int()
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for _ in range(m):
        u, v, w = tokens.int(), tokens.int(), tokens.float()
        adj[u].append((v, w))
    source, target = tokens.int(), tokens.int()
    if args.bellman_ford:
        try:
            dist, parent = bellman_ford(adj, source)
        except NegativeCycleError:
            print("The graph contains a negative cycle", file=sys.stderr)
            return 1
        print("The graph does not contain a negative cycle")
    else:
        dist, parent = dijkstra(adj, source)
    if parent[target] is None:
        print("Destination not reachable", file=sys.stderr)
        return 1
    print(f"Shortest path cost: {dist[target]:g}")
    print(" -> ".join(str(v) for v in path_to(parent, target)))
    return 0


def _run_apsp(args: argparse.Namespace) -> int:
    tokens = _Tokens(_read(args.path))
    n, m = tokens.int(), tokens.int()
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for _ in range(m):
        u, v, w = tokens.int(), tokens.int(), tokens.float()
        adj[u - 1].append((v - 1, w))
    dist, _ = floyd_warshall(adj)
    sys.stdout.write("Floyd Warshall:\n" + format_matrix(dist))
    sys.stdout.write("\nMatrix Multiplication:\n" + format_matrix(matrix_multiplication(adj)))
    sys.stdout.write(
        "\nMatrix Multiplication Faster:\n" + format_matrix(matrix_multiplication_faster(adj))
    )
    return 0


def _run_maxflow(args: argparse.Namespace) -> int:
    tokens = _Tokens(_read(args.path))
    n, m = tokens.int(), tokens.int()
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for _ in range(m):
        u, v, w = tokens.int(), tokens.int(), tokens.float()
        adj[u - 1].append((v - 1, w))
    source, sink = tokens.int(), tokens.int()
    print(f"{max_flow(adj, source - 1, sink - 1).value:g}")
    return 0


def _run_matching(args: argparse.Namespace) -> int:
    tokens = _Tokens(_read(args.path))
    pair_limit, person_limit = tokens.int(), tokens.int()
    left, right = tokens.int(), tokens.int()
    pairs = tokens.int()
    size = left + right + 2
    source, sink = size - 2, size - 1
    adj: list[list[tuple[int, float]]] = [[] for _ in range(size)]
    for _ in range(pairs):
        u, v = tokens.int(), tokens.int()
        adj[u].append((left + v, pair_limit))
    adj[source].extend((u, person_limit) for u in range(left))
    for v in range(right):
        adj[left + v].append((sink, person_limit))
    result = max_flow(adj, source, sink)
    print(f"{result.value:g}")
    for u in range(left):
        for v, _ in adj[u]:
            print(f"{u} {v - left} {result.residual[v][u]:g}")
    return 0


def _timed_run(
    adj: list[list[tuple[int, int]]],
    source: int,
    make_queue: Callable[[int], PriorityQueue],
) -> tuple[list[float], list[int | None], float]:
    start = time.perf_counter()
    dist, parent = dijkstra_with_queue(adj, source, make_queue(len(adj)))
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return dist, parent, elapsed_ms


def _run_heaps(args: argparse.Namespace) -> int:
    tokens = _Tokens(_read(args.graph))
    n, m = tokens.int(), tokens.int()
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for _ in range(m):
        u, v, w = tokens.int(), tokens.int(), tokens.int()
        adj[u].append((v, w))
        adj[v].append((u, w))
    queries = _Tokens(_read(args.queries))
    count = queries.int()
    print(f"{'Length':>6} {'Cost':>7} {'Binary':>13} {'Fibonacci':>13}")
    for _ in range(count):
        source, target = queries.int(), queries.int()
        dist, parent, binary_ms = _timed_run(adj, source, BinaryHeapQueue)
        _, _, fibonacci_ms = _timed_run(adj, source, FibonacciHeapQueue)
        cost = dist[target]
        cost_text = "inf" if cost == math.inf else str(int(cost))
        print(
            f"{path_length(parent, target):6d} {cost_text:>7} "
            f"{binary_ms:10g} ms {fibonacci_ms:10g} ms"
        )
    return 0


def _run_generate(args: argparse.Namespace) -> int:
    edges = generate_complete_graph(args.vertices, random.Random(args.seed))
    lines = [f"{args.vertices} {len(edges)}"]
    lines.extend(f"{u} {v} {w}" for u, v, w in edges)
    text = "\n".join(lines) + "\n"
    if args.output is None:
        sys.stdout.write(text)
    else:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(text)
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphalgo", description="Run graph algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)

    def with_path(name: str, help_text: str, run: Callable[[argparse.Namespace], int]):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("path", nargs="?", help="input file (default: stdin)")
        sub.set_defaults(run=run)
        return sub

    with_path("mst", "minimum spanning tree by Kruskal and Prim", _run_mst)
    sssp = with_path("sssp", "single-source shortest path", _run_sssp)
    sssp.add_argument("--bellman-ford", action="store_true",
                      help="use Bellman-Ford and check for negative cycles")
    with_path("apsp", "all-pairs shortest paths", _run_apsp)
    with_path("maxflow", "maximum flow between two vertices", _run_maxflow)
    with_path("matching", "capacitated bipartite matching", _run_matching)

    heaps = commands.add_parser("heaps", help="compare binary and Fibonacci heaps")
    heaps.add_argument("graph", help="undirected graph file")
    heaps.add_argument("queries", help="file of source/target queries")
    heaps.set_defaults(run=_run_heaps)

    generate = commands.add_parser("generate", help="write a random complete graph")
    generate.add_argument("vertices", type=int, nargs="?",
                          default=DEFAULT_GENERATED_VERTICES)
    generate.add_argument("--seed", type=int, default=None)
    generate.add_argument("--output", default=None)
    generate.set_defaults(run=_run_generate)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the chosen algorithm."""
    args = _parser().parse_args(argv)
    try:
        return args.run(args)
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1