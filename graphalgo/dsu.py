"""Disjoint-set forest with path compression."""

from __future__ import annotations


class DisjointSet:
    """Tracks a partition of the integers ``0 .. n-1`` into equivalence classes."""

    def __init__(self, n: int) -> None:
        self._parent: list[int | None] = [None] * n

    def find(self, v: int) -> int:
        """Return the root of the tree holding ``v``, compressing the path."""
        root = v
        while (up := self._parent[root]) is not None:
            root = up
        while v != root:
            up = self._parent[v]
            self._parent[v] = root
            v = up
        return root

    def union(self, u: int, v: int) -> None:
        """Merge the classes of ``u`` and ``v``; the root of ``u`` stays the root."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u != root_v:
            self._parent[root_v] = root_u

    def differ(self, u: int, v: int) -> bool:
        """True if ``u`` and ``v`` lie in different classes."""
        return self.find(u) != self.find(v)