# graphalgo

Classic graph algorithms in plain Python, with no runtime dependencies.
Python 3.10 or later is required.

| Module | What it holds |
| --- | --- |
| `graphalgo.dsu` | `DisjointSet` with `find`, `union` and `differ` |
| `graphalgo.mst` | `Edge`, `kruskal`, `prim`, `total_cost`, `format_edges` |
| `graphalgo.sssp` | `dijkstra`, `bellman_ford`, `path_to`, `NegativeCycleError` |
| `graphalgo.apsp` | `init_matrices`, `floyd_warshall`, `extend_shortest_paths`, `matrix_multiplication`, `matrix_multiplication_faster`, `format_matrix` |
| `graphalgo.traversal` | `dfs`, `bfs`, `topo_sort_dfs`, `topo_sort_bfs`, `transpose`, `strongly_connected_components` |
| `graphalgo.maxflow` | `max_flow` (Edmonds-Karp), `FlowResult`, `max_bipartite_matching`, `merge_edges` |
| `graphalgo.baseball` | `Team`, `Elimination`, `eliminated_teams`, `parse_division`, `format_elimination`, `join_names`, `main` |
| `graphalgo.heaps` | `PriorityQueue` interface, `BinaryHeapQueue`, `HeapError` |
| `graphalgo.fibheap` | `FibonacciHeapQueue` |
| `graphalgo.heap_dijkstra` | `dijkstra_with_queue`, `dijkstra_lazy`, `path_length` |
| `graphalgo.cli` | `generate_complete_graph` and the `graphalgo` command |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

Weighted graphs are adjacency lists indexed by vertex number: `adj[u]` holds
`(v, weight)` pairs for each edge leaving `u`. For an undirected graph, add
each edge in both directions. The traversal functions take plain lists of
neighbours instead of pairs.

```python
from graphalgo.mst import kruskal, prim, total_cost, format_edges

edges = [(0, 1, 14), (0, 3, 5), (1, 5, 2), (0, 5, 7), (2, 4, 4), (2, 6, 3),
         (6, 4, 2), (1, 2, 15), (3, 4, 22)]
adj = [[] for _ in range(7)]
for u, v, w in edges:
    adj[u].append((v, w))
    adj[v].append((u, w))

tree = kruskal(adj)
print(total_cost(tree))
print(format_edges(prim(adj, 0)))   # {(u,v),(u,v),...}
```

A spanning tree with fewer than `n - 1` edges means the graph is not connected.

## Shortest paths

`dijkstra(adj, source)` and `bellman_ford(adj, source)` both return
`(dist, parent)`; unreachable vertices have distance `inf` and parent `None`.
`dijkstra` expects non-negative weights. `bellman_ford` accepts negative
edges and raises `NegativeCycleError` when a negative cycle is reachable from
the source. `path_to(parent, target)` rebuilds the path, source first.

```python
from graphalgo.sssp import bellman_ford, path_to, NegativeCycleError

try:
    dist, parent = bellman_ford(adj, 0)
except NegativeCycleError:
    print("the graph contains a negative cycle")
else:
    print(dist[4], path_to(parent, 4))
```

The all-pairs functions in `graphalgo.apsp` return distance matrices in which
unreachable pairs are `inf`; `floyd_warshall` also returns a predecessor
matrix. `format_matrix` renders a matrix right-aligned with `INF` in those
cells.

## Maximum flow

`max_flow(adj, source, sink)` returns a `FlowResult` with the flow `value`,
the `residual` capacities (the flow on an original edge `u -> v` appears as
`residual[v][u]`) and the set of vertices `reachable` from the source in the
residual graph, which is the source side of a minimum cut. An unbounded path
raises `ValueError`. A repeated `u -> v` pair keeps only its last capacity;
`merge_edges(n, edges)` builds a network that adds parallel edges up and
routes antiparallel edges through extra vertices.

`graphalgo.baseball` applies max flow to baseball elimination:
`eliminated_teams(teams)` returns an `Elimination` for every team that can no
longer finish first, with the subset of teams that proves it.

## Priority queues

`BinaryHeapQueue` and `FibonacciHeapQueue` address entries by an integer
identifier in `range(capacity)`:

```python
from graphalgo.heaps import BinaryHeapQueue
from graphalgo.fibheap import FibonacciHeapQueue

for queue in (BinaryHeapQueue(4), FibonacciHeapQueue(4)):
    queue.push("a", 10, 0)
    queue.push("b", 20, 1)
    queue.decrease_key(1, 5)
    print(queue.top(), len(queue), 0 in queue)
```

Both support `push`, `top`, `pop`, `decrease_key`, `remove`, `len()` and
`in`; misuse (empty heap, unknown or out-of-range identifier, a key that is
not lower) raises `HeapError`. Either queue can drive
`dijkstra_with_queue` or `dijkstra_lazy` in `graphalgo.heap_dijkstra`.

## Command line

```
graphalgo --help
graphalgo-baseball --help
```

`graphalgo` has these subcommands. Each reads whitespace-separated numbers from
the named file, or from standard input when the file is left out.

- `graphalgo mst [FILE]` – `n m`, then `m` undirected edges `u v w`
  (vertices from 0). Prints the tree cost and the edges chosen by Prim's and
  Kruskal's algorithms; a disconnected graph is an error.
- `graphalgo sssp [FILE] [--bellman-ford]` – `n m`, `m` directed edges
  `u v w` (from 0), then `source target`. Prints the path cost and the path.
- `graphalgo apsp [FILE]` – `n m`, `m` directed edges `u v w` (from 1).
  Prints the Floyd-Warshall and both matrix-multiplication distance matrices.
- `graphalgo maxflow [FILE]` – `n m`, `m` directed edges `u v capacity`
  (from 1), then `source sink`. Prints the maximum flow.
- `graphalgo matching [FILE]` – a per-pair limit and a per-person limit, the
  sizes of the two sides, the number of allowed pairs, then the pairs `u v`
  (each side numbered from 0). Prints the total flow, then `u v flow` for each
  allowed pair.
- `graphalgo heaps GRAPH QUERIES` – an undirected integer-weighted graph and
  a file of `k` source/target queries. Prints, per query, the path length,
  cost and the time Dijkstra took with each heap.
- `graphalgo generate [VERTICES] [--seed N] [--output FILE]` – writes a random
  complete graph (8000 vertices by default) in the format `heaps` reads.

`graphalgo-baseball [FILE]` reads a team count, then for each team its name,
wins, losses, remaining games and the row of games left against every team,
and prints an explanation for each eliminated team.

## What it does not do

The command reads and writes plain text only: there is no graph file format
beyond the whitespace-separated numbers above, no drawing of graphs and no
interactive mode.