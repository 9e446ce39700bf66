"""A last-in first-out stack."""

from __future__ import annotations

from typing import Any

from adtkit.errors import IllegalStateError


class Stack:
    """An unbounded stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IllegalStateError("cannot pop from an empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return whether the stack holds no value."""
        return not self._items

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IllegalStateError("an empty stack has no top")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)