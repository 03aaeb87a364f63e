"""String values stored directly under their keys."""

from __future__ import annotations

from itertools import islice

from mynosql.keyspace import KeySpace


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


def set_string(space: KeySpace, key: str, value: str) -> None:
    """Store ``value`` under ``key``; both must be non-empty."""
    if not key or not value:
        raise ValueError("key and value must be non-empty strings")
    space.add(key, value)


def get_string(space: KeySpace, key: str) -> str | None:
    """Return the string stored under ``key``, or None."""
    return space.get(key)


def string_range(space: KeySpace, start: int, end: int) -> list[tuple[int, str, str]]:
    """Return (index, key, value) rows for the inclusive index range, newest key first."""
    indices = _index_range(len(space), start, end)
    rows = islice(space.items(), indices.start, indices.stop)
    return [(index, key, value) for index, (key, value) in zip(indices, rows)]