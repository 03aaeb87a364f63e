"""Key spaces: the keys of one data type, newest key first."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class DataType(IntEnum):
    """The kinds of value a database keeps in separate key spaces."""

    STRING = 0
    LIST = 1
    SORTED_SET = 2
    HASH = 3


class KeySpace:
    """Keys of one data type mapped to their values.

    Iteration runs from the most recently added key to the oldest one.
    Replacing the value of an existing key leaves its position unchanged.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``, or None if there is none."""
        return self._entries.get(key)

    def add(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``; a new key goes in front of all others."""
        self._entries[key] = value

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raise KeyError if it is absent."""
        try:
            return self._entries.pop(key)
        except KeyError:
            raise KeyError(key) from None

    def items(self) -> list[tuple[str, Any]]:
        """Return (key, value) pairs from the newest key to the oldest."""
        return list(reversed(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries