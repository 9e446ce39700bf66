"""Small algorithms over lists of comparable values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from adtkit.errors import NotOrderedError


@dataclass(frozen=True)
class Largest:
    """The largest value of a sequence and the position of its first occurrence."""

    largest: Any
    pos: int


def greater_than(values: Sequence[Any], k: Any) -> int:
    """Count how many values are strictly greater than ``k``."""
    return sum(1 for value in values if value > k)


def member(values: Sequence[Any], k: Any) -> bool:
    """Return whether ``k`` occurs in ``values``."""
    return any(value == k for value in values)


def largest(values: Sequence[Any]) -> Largest:
    """Return the largest value and the position where it first appears."""
    if not values:
        raise ValueError("largest() of an empty sequence")
    best_pos, best = 0, values[0]
    for pos, value in enumerate(values):
        if value > best:
            best_pos, best = pos, value
    return Largest(best, best_pos)


def remove(values: list[Any], elem: Any) -> None:
    """Remove the first occurrence of ``elem``, shifting the rest left and padding with 0.

    The list keeps its length. Nothing happens when ``elem`` is absent.
    """
    try:
        index = values.index(elem)
    except ValueError:
        return
    del values[index]
    values.append(0)


def compare(first: Any, second: Any) -> int:
    """Return 0 if equal, -1 if ``first`` is smaller, 1 otherwise."""
    if first == second:
        return 0
    return -1 if first < second else 1


def ordering(values: Sequence[Any]) -> int:
    """Return the common :func:`compare` result of every pair of neighbours.

    Ascending sequences give -1, constant ones 0 and descending ones 1.
    Sequences shorter than two elements count as constant.

    :raises NotOrderedError: if neighbouring pairs disagree.
    """
    results = {compare(a, b) for a, b in zip(values, values[1:])}
    if not results:
        return 0
    if len(results) > 1:
        raise NotOrderedError()
    return results.pop()


def reverse(values: list[Any]) -> None:
    """Reverse ``values`` in place."""
    values.reverse()