"""Graph algorithms: spanning trees, shortest paths, traversals, maximum flow,
baseball elimination and addressable binary and Fibonacci heaps."""

__version__ = "0.1.0"