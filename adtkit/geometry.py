"""Simple two-component value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A point in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"X coord: {self.x:g}\nY coord: {self.y:g}\n"


@dataclass
class ComplexNumber:
    """A complex number held as its real and imaginary parts."""

    first_real: float
    second_real: float

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(
            self.first_real + other.first_real,
            self.second_real + other.second_real,
        )