"""Hash tables of field/value pairs with separate chaining."""

from __future__ import annotations

TABLE_SIZE = 101
LOAD_THRESHOLD = 0.7
_WORD = 1 << 64


def djb2(text: str, table_size: int) -> int:
    """Return the djb2 hash of ``text`` (as UTF-8, signed bytes) modulo ``table_size``."""
    index = 5381
    for byte in text.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        index = (index * 33 + char) % _WORD
    return index % table_size


class HashTable:
    """Fields mapped to values, doubling its bucket count when too full."""

    def __init__(self, table_size: int = TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: list[list[list[str]]] = [[] for _ in range(table_size)]
        self._load = 0

    def _bucket(self, field: str) -> list[list[str]]:
        return self._buckets[djb2(field, len(self._buckets))]

    def set(self, field: str, value: str) -> None:
        """Store ``value`` under ``field``, replacing any earlier value."""
        bucket = self._bucket(field)
        for entry in bucket:
            if entry[0] == field:
                entry[1] = value
                return
        bucket.append([field, value])
        self._load += 1
        if self.load_factor() > LOAD_THRESHOLD:
            self._grow()

    def get(self, field: str) -> str | None:
        """Return the value of ``field``, or None."""
        for stored, value in self._bucket(field):
            if stored == field:
                return value
        return None

    def delete(self, field: str) -> None:
        """Remove ``field``; raise KeyError if it is absent."""
        bucket = self._bucket(field)
        for position, entry in enumerate(bucket):
            if entry[0] == field:
                del bucket[position]
                self._load -= 1
                return
        raise KeyError(field)

    def _grow(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry[0]).append(entry)

    def __len__(self) -> int:
        return self._load

    def load_factor(self) -> float:
        """Return the number of fields per bucket."""
        return self._load / len(self._buckets)

    def table_size(self) -> int:
        """Return the current number of buckets."""
        return len(self._buckets)