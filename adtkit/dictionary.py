"""A dictionary of key/value pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Pair:
    """A key together with its value."""

    key: Any
    value: Any


class PointerDictionary:
    """A map from keys to values, where putting an existing key updates it."""

    def __init__(self, max_elems: int = 10) -> None:
        self.max_elems_inside = max_elems
        self._pairs: dict[Any, Pair] = {}

    def is_empty(self) -> bool:
        """Return whether the dictionary holds no pair."""
        return not self._pairs

    def belongs_to(self, key: Any) -> bool:
        """Return whether ``key`` is present."""
        return key in self._pairs

    def put(self, pair: Pair) -> None:
        """Add ``pair``, or update the value if its key is already present."""
        if self.belongs_to(pair.key):
            self.update_pair(pair)
        else:
            self._pairs[pair.key] = Pair(pair.key, pair.value)

    def remove(self, key: Any) -> None:
        """Remove the pair with ``key``.

        :raises KeyError: if ``key`` is absent.
        """
        if not self.belongs_to(key):
            raise KeyError(key)
        self._pairs.pop(key)

    def get_value(self, key: Any) -> Any:
        """Return the value stored under ``key``.

        :raises KeyError: if ``key`` is absent.
        """
        return self.find(key).value

    def update_pair(self, pair: Pair) -> None:
        """Replace the value stored under ``pair.key``.

        :raises KeyError: if the key is absent.
        """
        self.find(pair.key).value = pair.value

    def find(self, key: Any) -> Pair:
        """Return the pair stored under ``key``.

        :raises KeyError: if ``key`` is absent.
        """
        return self._pairs[key]

    def __len__(self) -> int:
        return len(self._pairs)