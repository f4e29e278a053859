"""A priority queue backed by a Fibonacci heap."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from graphalgo.heaps import DEFAULT_CAPACITY, HeapError, PriorityQueue


class _Node:
    __slots__ = ("item", "key", "ident", "parent", "child", "left", "right",
                 "mark", "degree")

    def __init__(self, item: Any, key: Any, ident: int) -> None:
        self.item = item
        self.key = key
        self.ident = ident
        self.parent: _Node | None = None
        self.child: _Node | None = None
        self.left: _Node = self
        self.right: _Node = self
        self.mark = False
        self.degree = 0


def _splice(node: _Node, anchor: _Node) -> None:
    """Insert a lone ``node`` to the left of ``anchor`` in its circular list."""
    node.right = anchor
    node.left = anchor.left
    anchor.left.right = node
    anchor.left = node


def _unlink(node: _Node) -> None:
    """Take ``node`` out of its circular list, leaving it on its own."""
    node.left.right = node.right
    node.right.left = node.left
    node.left = node.right = node


def _siblings(start: _Node) -> Iterator[_Node]:
    node = start
    while True:
        yield node
        node = node.right
        if node is start:
            return


class FibonacciHeapQueue(PriorityQueue):
    """A priority queue with amortised constant-time push and decrease-key."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._root: _Node | None = None
        self._count = 0
        self._index: dict[int, _Node] = {}

    def _lookup(self, ident: int) -> _Node:
        try:
            return self._index[ident]
        except KeyError:
            raise HeapError(f"no entry queued under {ident}") from None

    def _add_root(self, node: _Node) -> None:
        if self._root is None:
            self._root = node
        else:
            _splice(node, self._root)
            if node.key < self._root.key:
                self._root = node

    def _link(self, y: _Node, x: _Node) -> None:
        """Make the lone root ``y`` a child of ``x``."""
        y.parent = x
        if x.child is None:
            x.child = y
        else:
            _splice(y, x.child)
        x.degree += 1
        y.mark = False

    def _consolidate(self) -> None:
        assert self._root is not None
        roots = list(_siblings(self._root))
        for node in roots:
            node.left = node.right = node
        by_degree: dict[int, _Node] = {}
        for x in roots:
            degree = x.degree
            while (y := by_degree.pop(degree, None)) is not None:
                if y.key < x.key:
                    x, y = y, x
                self._link(y, x)
                degree += 1
            by_degree[degree] = x
        self._root = None
        for degree in sorted(by_degree):
            self._add_root(by_degree[degree])

    def _cut(self, x: _Node, y: _Node) -> None:
        """Detach ``x`` from its parent ``y`` and make it a root."""
        if x.right is x:
            y.child = None
        else:
            if y.child is x:
                y.child = x.right
            _unlink(x)
        y.degree -= 1
        assert self._root is not None
        _splice(x, self._root)
        x.parent = None
        x.mark = False

    def _cascading_cut(self, y: _Node) -> None:
        while (z := y.parent) is not None:
            if not y.mark:
                y.mark = True
                return
            self._cut(y, z)
            y = z

    def push(self, item: Any, key: Any, ident: int) -> None:
        """Queue ``item`` with priority ``key`` under ``ident``."""
        self._validate_ident(ident)
        node = _Node(item, key, ident)
        self._index[ident] = node
        self._add_root(node)
        self._count += 1

    def top(self) -> Any:
        """Return the item with the smallest key without removing it."""
        if self._root is None:
            raise HeapError("heap is empty")
        return self._root.item

    def pop(self) -> Any:
        """Remove and return the item with the smallest key."""
        z = self._root
        if z is None:
            raise HeapError("heap is empty")
        if z.child is not None:
            for child in list(_siblings(z.child)):
                _unlink(child)
                child.parent = None
                _splice(child, z)
            z.child = None
        if z.right is z:
            self._root = None
        else:
            self._root = z.right
            _unlink(z)
            self._consolidate()
        self._count -= 1
        if self._index.get(z.ident) is z:
            del self._index[z.ident]
        return z.item

    def decrease_key(self, ident: int, key: Any) -> None:
        """Lower the key under ``ident``; a larger key is refused."""
        node = self._lookup(ident)
        if key > node.key:
            raise HeapError("new key has less priority than current key")
        node.key = key
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self._cut(node, parent)
            self._cascading_cut(parent)
        assert self._root is not None
        if node.key < self._root.key:
            self._root = node

    def remove(self, ident: int) -> Any:
        """Remove the entry queued under ``ident`` and return its item."""
        node = self._lookup(ident)
        parent = node.parent
        if parent is not None:
            self._cut(node, parent)
            self._cascading_cut(parent)
        self._root = node
        return self.pop()

    def __contains__(self, ident: object) -> bool:
        return ident in self._index

    def __len__(self) -> int:
        return self._count