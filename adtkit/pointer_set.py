"""A set that keeps its elements in insertion order."""

from __future__ import annotations

from typing import Any, Iterator


class PointerSet:
    """A set of hashable values, iterated in the order they were inserted."""

    def __init__(self, max_elems: int = 10) -> None:
        self.max_elems_inside = max_elems
        self._items: dict[Any, None] = {}

    def is_empty(self) -> bool:
        """Return whether the set holds no element."""
        return not self._items

    def belongs_to(self, value: Any) -> bool:
        """Return whether ``value`` is in the set."""
        return value in self._items

    def __contains__(self, value: Any) -> bool:
        return self.belongs_to(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already present."""
        self._items.setdefault(value, None)

    def remove(self, value: Any) -> None:
        """Remove ``value``.

        :raises KeyError: if ``value`` is not in the set.
        """
        if value not in self._items:
            raise KeyError(value)
        self._items.pop(value)

    def find(self, value: Any) -> int | None:
        """Return the position of ``value`` in insertion order, or None if absent."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return None

    def _derived(self, values: Any) -> PointerSet:
        result = PointerSet(self.max_elems_inside)
        for value in values:
            result.insert(value)
        return result

    def union(self, other: PointerSet) -> PointerSet:
        """Return the elements of ``other`` followed by those of this set not in it."""
        result = self._derived(other)
        for value in self:
            result.insert(value)
        return result

    def intersect(self, other: PointerSet) -> PointerSet:
        """Return the elements of this set that also belong to ``other``."""
        return self._derived(value for value in self if value in other)

    def difference(self, other: PointerSet) -> PointerSet:
        """Return the elements of this set that do not belong to ``other``."""
        return self._derived(value for value in self if value not in other)

    def elements(self) -> list[Any]:
        """Return the elements as a list in insertion order."""
        return list(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        body = "".join(f"{value} | " for value in self._items)
        return f"List Content: \n{body}\n"