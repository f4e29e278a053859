"""Addressable priority queues: the common interface and a binary heap."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

DEFAULT_CAPACITY = 10


class HeapError(LookupError):
    """A heap operation was asked of an empty heap or an unknown entry."""


class PriorityQueue(ABC):
    """A min-priority queue whose entries are addressed by integer identifiers.

    Identifiers lie in ``range(capacity)``. Pushing an identifier that is
    already queued adds a second entry; the identifier then refers to the
    newest one.
    """

    _capacity: int

    def _validate_ident(self, ident: int) -> None:
        if not 0 <= ident < self._capacity:
            raise HeapError(
                f"identifier {ident} is outside 0 .. {self._capacity - 1}"
            )

    @abstractmethod
    def push(self, item: Any, key: Any, ident: int) -> None:
        """Queue ``item`` with priority ``key`` under ``ident``."""

    @abstractmethod
    def top(self) -> Any:
        """Return the item with the smallest key without removing it."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the item with the smallest key."""

    @abstractmethod
    def decrease_key(self, ident: int, key: Any) -> None:
        """Lower the key of the entry queued under ``ident``."""

    @abstractmethod
    def remove(self, ident: int) -> Any:
        """Remove the entry queued under ``ident`` and return its item."""

    @abstractmethod
    def __contains__(self, ident: object) -> bool:
        """True if an entry is queued under ``ident``."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of queued entries."""


class _Entry:
    __slots__ = ("item", "key", "ident", "pos")

    def __init__(self, item: Any, key: Any, ident: int, pos: int) -> None:
        self.item = item
        self.key = key
        self.ident = ident
        self.pos = pos


class BinaryHeapQueue(PriorityQueue):
    """A priority queue kept in an array-backed binary min-heap."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._heap: list[_Entry] = []
        self._index: dict[int, _Entry] = {}

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].pos = i
        heap[j].pos = j

    def _sift_up(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            parent = (pos - 1) // 2
            if not heap[pos].key < heap[parent].key:
                return
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = pos
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < size and heap[child].key < heap[smallest].key:
                    smallest = child
            if smallest == pos:
                return
            self._swap(pos, smallest)
            pos = smallest

    def _forget(self, entry: _Entry) -> None:
        if self._index.get(entry.ident) is entry:
            del self._index[entry.ident]

    def _lookup(self, ident: int) -> _Entry:
        try:
            return self._index[ident]
        except KeyError:
            raise HeapError(f"no entry queued under {ident}") from None

    def push(self, item: Any, key: Any, ident: int) -> None:
        """Queue ``item`` with priority ``key`` under ``ident``."""
        self._validate_ident(ident)
        entry = _Entry(item, key, ident, len(self._heap))
        self._heap.append(entry)
        self._index[ident] = entry
        self._sift_up(entry.pos)

    def top(self) -> Any:
        """Return the item with the smallest key without removing it."""
        if not self._heap:
            raise HeapError("heap is empty")
        return self._heap[0].item

    def pop(self) -> Any:
        """Remove and return the item with the smallest key."""
        if not self._heap:
            raise HeapError("heap is empty")
        self._swap(0, len(self._heap) - 1)
        entry = self._heap.pop()
        if self._heap:
            self._sift_down(0)
        self._forget(entry)
        return entry.item

    def decrease_key(self, ident: int, key: Any) -> None:
        """Lower the key under ``ident``; the new key must be strictly smaller."""
        entry = self._lookup(ident)
        if not key < entry.key:
            raise HeapError("new key has less priority than current key")
        entry.key = key
        self._sift_up(entry.pos)

    def remove(self, ident: int) -> Any:
        """Remove the entry queued under ``ident`` and return its item."""
        entry = self._lookup(ident)
        pos = entry.pos
        last = len(self._heap) - 1
        if pos != last:
            self._swap(pos, last)
        self._heap.pop()
        if pos < len(self._heap):
            self._sift_up(pos)
            self._sift_down(pos)
        self._forget(entry)
        return entry.item

    def __contains__(self, ident: object) -> bool:
        return ident in self._index

    def __len__(self) -> int:
        return len(self._heap)