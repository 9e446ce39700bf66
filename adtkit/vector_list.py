"""A list stored in a contiguous array whose size follows its contents."""

from __future__ import annotations

from typing import Any

from adtkit.errors import OutOfBoundError

_OUT_OF_BOUNDS = "Error: out of boundary indexes"


class VectorList:
    """An array-backed list with ``dimension`` slots.

    Positions run from ``0`` to ``dimension``; position ``dimension`` is the
    end marker just past the last slot. Empty slots hold ``None``.
    """

    def __init__(self, dimension: int = 0) -> None:
        if dimension < 0:
            raise ValueError("dimension must not be negative")
        self._items: list[Any] = [None] * dimension
        self._elements_inside = 0

    @property
    def dimension(self) -> int:
        """Number of slots currently allocated."""
        return len(self._items)

    @property
    def elements_inside(self) -> int:
        """Number of elements added with :meth:`insert_node_after`."""
        return self._elements_inside

    def _out_of_bound(self, position: int) -> bool:
        return position < 0 or position > self.dimension

    def _check_slot(self, position: int) -> None:
        if not 0 <= position < self.dimension:
            raise OutOfBoundError(_OUT_OF_BOUNDS)

    def write_value_at(self, position: int, value: Any) -> None:
        """Store ``value`` in the slot at ``position``."""
        self._check_slot(position)
        self._items[position] = value

    def read_value_at(self, position: int) -> Any:
        """Return the value in the slot at ``position``."""
        self._check_slot(position)
        return self._items[position]

    def insert_node_after(self, position: int, value: Any) -> None:
        """Grow the list by one slot and put ``value`` at ``position``.

        Values from ``position`` onwards move one slot to the right.
        """
        if position < 0 or position > self.dimension:
            raise OutOfBoundError(_OUT_OF_BOUNDS)
        self._items.append(None)
        self.shift_right(position)
        self._items[position] = value
        self._elements_inside += 1

    def delete_node_at(self, position: int) -> None:
        """Remove the slot at ``position``, moving later values left."""
        if self.dimension == 0:
            raise OutOfBoundError("dimension must be greater than 0")
        self.shift_left(position)
        self._items.pop()
        self._elements_inside -= 1

    def is_empty(self) -> bool:
        """Return whether no element has been inserted."""
        return self._elements_inside == 0

    def is_last_position(self, position: int) -> bool:
        """Return whether ``position`` is the end marker."""
        if self._out_of_bound(position):
            raise OutOfBoundError(_OUT_OF_BOUNDS)
        return position == self.dimension

    def first_position(self) -> int:
        """Return the first position of the list."""
        return 0

    def next_position(self, position: int) -> int:
        """Return the position following ``position``."""
        return position + 1

    def previous_position(self, position: int) -> int:
        """Return the position preceding ``position``."""
        return position - 1

    def shift_right(self, start: int = 0) -> None:
        """Move every value from ``start`` one slot right; the last value is lost."""
        if self._out_of_bound(start):
            raise OutOfBoundError(_OUT_OF_BOUNDS)
        if start < self.dimension:
            self._items[start + 1:] = self._items[start:-1]

    def shift_left(self, start: int) -> None:
        """Move every value after ``start`` one slot left; the last slot is cleared."""
        if self._out_of_bound(start):
            raise OutOfBoundError(_OUT_OF_BOUNDS)
        if start < self.dimension:
            self._items[start:] = self._items[start + 1:] + [None]