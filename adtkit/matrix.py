"""A dense two-dimensional matrix of floats."""

from __future__ import annotations

from typing import Iterator

_OUT_OF_INDEX = "Error: out of index"


class Matrix:
    """A ``rows`` by ``cols`` matrix indexed with ``m[row, col]``."""

    def __init__(self, rows: int, cols: int, initial_value: float = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._data = [[float(initial_value)] * cols for _ in range(rows)]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(_OUT_OF_INDEX)
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check(key)
        return self._data[row][col]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check(key)
        self._data[row][col] = value

    def _positions(self) -> Iterator[tuple[int, int]]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def scale(self, scalar: float) -> None:
        """Multiply every element by ``scalar`` in place."""
        self._data = [[value * scalar for value in row] for row in self._data]

    def transpose_from(self, other: Matrix) -> None:
        """Fill this matrix with the transpose of ``other``."""
        for row, col in self._positions():
            self[row, col] = other[col, row]

    def copy(self) -> Matrix:
        """Return an independent copy."""
        result = Matrix(self.rows, self.cols)
        result._data = [list(row) for row in self._data]
        return result

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("No. cols differs from no. rows of other matrix.")
        result = Matrix(self.rows, other.cols)
        columns = list(zip(*other._data))
        result._data = [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._data
        ]
        return result

    def __str__(self) -> str:
        lines = ["".join(f"{value:g} " for value in row) for row in self._data]
        lines.append("-------------")
        return "\n".join(lines)