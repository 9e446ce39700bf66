"""A bounded priority queue kept as a binary min-heap."""

from __future__ import annotations

import heapq
from typing import Any

from adtkit.errors import IllegalStateError


class HeapPriorityQueue:
    """A min-priority queue holding at most ``max_length`` values."""

    def __init__(self, max_length: int) -> None:
        if max_length < 0:
            raise ValueError("max_length must not be negative")
        self.max_elems_inside = max_length
        self._heap: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add ``value`` to the queue."""
        if len(self._heap) >= self.max_elems_inside:
            raise IllegalStateError("cannot insert into a full priority queue")
        heapq.heappush(self._heap, value)

    def minimum(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._heap:
            raise IllegalStateError("an empty priority queue has no minimum")
        return self._heap[0]

    def delete_minimum(self) -> None:
        """Remove the smallest value."""
        if not self._heap:
            raise IllegalStateError("cannot delete from an empty priority queue")
        heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)