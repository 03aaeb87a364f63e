"""Double-ended lists of string values."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Iterator


def _index_range(length: int, start: int, end: int) -> range:
    """Resolve inclusive, possibly negative, bounds against ``length``."""
    if start < 0:
        start += length
    if start < 0:
        start = 0
    if end < 0:
        end += length
    if length <= start or end < start:
        return range(0)
    return range(start, min(end, length - 1) + 1)


class ValueList:
    """A list of values that grows and shrinks at both ends."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def push_left(self, value: str) -> None:
        """Put ``value`` at the left end."""
        self._items.appendleft(value)

    def push_right(self, value: str) -> None:
        """Put ``value`` at the right end."""
        self._items.append(value)

    def pop_left(self) -> str:
        """Remove and return the leftmost value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items.popleft()

    def pop_right(self) -> str:
        """Remove and return the rightmost value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items.pop()

    def range(self, start: int, end: int) -> list[tuple[int, str]]:
        """Return (index, value) pairs for the inclusive range, left to right."""
        indices = _index_range(len(self._items), start, end)
        values = islice(self._items, indices.start, indices.stop)
        return list(zip(indices, values))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)