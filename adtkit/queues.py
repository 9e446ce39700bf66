"""First-in first-out queues with a bounded number of elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any

from adtkit.errors import IllegalStateError, OutOfBoundError

_LIMIT_REACHED = "You've reached the minimum/maximum elements that you can remove/add."


class Queue(ABC):
    """A queue that holds at most ``max_size`` elements."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self.elems_inside = 0

    @abstractmethod
    def is_empty(self) -> bool:
        """Return whether the queue holds no element."""

    @abstractmethod
    def read(self) -> Any:
        """Return the element at the head without removing it."""

    @abstractmethod
    def dequeue(self) -> Any:
        """Remove and return the element at the head."""

    @abstractmethod
    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail."""


class VectorQueue(Queue):
    """A queue over a fixed array whose slots are used once each.

    Dequeued slots are not reused, so at most ``max_size`` elements can be
    enqueued over the life of the queue.
    """

    _INITIAL_INDEX = -1

    def __init__(self, max_size: int) -> None:
        super().__init__(max_size)
        self._slots: list[Any] = [None] * max_size
        self._start = self._INITIAL_INDEX
        self._end = self._INITIAL_INDEX

    def is_empty(self) -> bool:
        return self._start == self._INITIAL_INDEX or self._start > self._end

    def read(self) -> Any:
        if self.is_empty():
            raise OutOfBoundError(_LIMIT_REACHED)
        return self._slots[self._start]

    def dequeue(self) -> Any:
        if self.is_empty():
            raise OutOfBoundError(_LIMIT_REACHED)
        value = self._slots[self._start]
        self._start += 1
        self.elems_inside -= 1
        return value

    def enqueue(self, value: Any) -> None:
        if self._end + 1 >= self.max_size:
            raise OutOfBoundError(_LIMIT_REACHED)
        if self._start == self._INITIAL_INDEX:
            self._start = 0
        self._end += 1
        self._slots[self._end] = value
        self.elems_inside += 1


class PointerQueue(Queue):
    """A linked queue holding at most ``max_size`` elements at a time."""

    def __init__(self, max_size: int) -> None:
        super().__init__(max_size)
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """Return whether the queue holds ``max_size`` elements."""
        return len(self._items) == self.max_size

    def read(self) -> Any:
        if self.is_empty():
            raise IllegalStateError("cannot read from an empty queue")
        return self._items[0]

    def dequeue(self) -> Any:
        if self.is_empty():
            raise IllegalStateError("cannot dequeue from an empty queue")
        self.elems_inside -= 1
        return self._items.popleft()

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise IllegalStateError("cannot enqueue into a full queue")
        self._items.append(value)
        self.elems_inside += 1

    def __len__(self) -> int:
        return len(self._items)