"""An in-memory store of strings, lists, sorted sets and hashes."""

from __future__ import annotations

import random

from mynosql.hashes import HashTable
from mynosql.keyspace import DataType, KeySpace
from mynosql.lists import ValueList
from mynosql.sortedset import SortedSet
from mynosql.strings import get_string, set_string, string_range


class Database:
    """Separate key spaces for each data type, with command-style operations."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._spaces = {data_type: KeySpace() for data_type in DataType}

    def delete(self, key: str, data_type: DataType) -> None:
        """Remove ``key`` from the key space of ``data_type``; raise KeyError if absent."""
        self._spaces[DataType(data_type)].remove(key)

    # Strings

    def set(self, key: str, value: str) -> None:
        """Store a string value; raise ValueError if key or value is empty."""
        set_string(self._spaces[DataType.STRING], key, value)

    def get(self, key: str) -> str | None:
        """Return the string under ``key``, or None."""
        return get_string(self._spaces[DataType.STRING], key)

    def srange(self, start: int, end: int) -> list[tuple[int, str, str]]:
        """Return (index, key, value) rows of strings, newest key first."""
        return string_range(self._spaces[DataType.STRING], start, end)

    # Lists

    def _list(self, key: str) -> ValueList:
        space = self._spaces[DataType.LIST]
        found = space.get(key)
        if found is None:
            found = ValueList()
            space.add(key, found)
        return found

    def _existing_list(self, key: str) -> ValueList:
        found = self._spaces[DataType.LIST].get(key)
        if found is None:
            raise KeyError(f"no list is called {key!r}")
        return found

    def lpush(self, key: str, value: str) -> None:
        """Push ``value`` onto the left end of the list ``key``."""
        self._list(key).push_left(value)

    def rpush(self, key: str, value: str) -> None:
        """Push ``value`` onto the right end of the list ``key``."""
        self._list(key).push_right(value)

    def lpop(self, key: str) -> str:
        """Pop the leftmost value; KeyError if no such list, IndexError if empty."""
        return self._existing_list(key).pop_left()

    def rpop(self, key: str) -> str:
        """Pop the rightmost value; KeyError if no such list, IndexError if empty."""
        return self._existing_list(key).pop_right()

    def llen(self, key: str) -> int:
        """Return the length of the list ``key``, 0 if it does not exist."""
        found = self._spaces[DataType.LIST].get(key)
        return 0 if found is None else len(found)

    def lrange(self, key: str, start: int, end: int) -> list[tuple[int, str]]:
        """Return (index, value) pairs of the list for the inclusive range."""
        found = self._spaces[DataType.LIST].get(key)
        return [] if found is None else found.range(start, end)

    # Sorted sets

    def _zset(self, key: str) -> SortedSet | None:
        return self._spaces[DataType.SORTED_SET].get(key)

    def _existing_zset(self, key: str) -> SortedSet:
        found = self._zset(key)
        if found is None:
            raise KeyError(key)
        return found

    def zadd(self, key: str, score: float, name: str) -> bool:
        """Add ``name`` with ``score``; return False if the score is already taken."""
        space = self._spaces[DataType.SORTED_SET]
        found = space.get(key)
        if found is None:
            found = SortedSet(self._rng)
            space.add(key, found)
        return found.add(score, name)

    def zcard(self, key: str) -> int:
        """Return the number of members, 0 if the set does not exist."""
        found = self._zset(key)
        return 0 if found is None else len(found)

    def zcount(self, key: str, minimum: float, maximum: float) -> int:
        """Return how many members have a score within [minimum, maximum]."""
        found = self._zset(key)
        return 0 if found is None else found.count(minimum, maximum)

    def zrange(self, key: str, start: int, stop: int) -> list[tuple[int, str]]:
        """Return (index, name) pairs for the inclusive index range."""
        found = self._zset(key)
        return [] if found is None else found.range(start, stop)

    def zrangebyscore(
        self, key: str, minimum: float, maximum: float
    ) -> list[tuple[int, float, str]]:
        """Return (position, score, name) rows for scores within [minimum, maximum]."""
        found = self._zset(key)
        return [] if found is None else found.range_by_score(minimum, maximum)

    def zrank(self, key: str, name: str) -> int:
        """Return the position of ``name``; raise KeyError if set or member is absent."""
        return self._existing_zset(key).rank(name)

    def zrem(self, key: str, name: str) -> bool:
        """Remove ``name``; raise KeyError if the set is absent, return whether removed."""
        return self._existing_zset(key).remove(name)

    def zremrangebyscore(self, key: str, minimum: float, maximum: float) -> int:
        """Remove members within the score range; raise KeyError if the set is absent."""
        return self._existing_zset(key).remove_range_by_score(minimum, maximum)

    # Hashes

    def hset(self, key: str, field: str, value: str) -> None:
        """Store ``value`` under ``field`` in the hash ``key``."""
        space = self._spaces[DataType.HASH]
        found = space.get(key)
        if found is None:
            found = HashTable()
            space.add(key, found)
        found.set(field, value)

    def hget(self, key: str, field: str) -> str | None:
        """Return the value of ``field`` in the hash ``key``, or None."""
        found = self._spaces[DataType.HASH].get(key)
        return None if found is None else found.get(field)

    def hdel(self, key: str, field: str) -> None:
        """Remove ``field`` from the hash ``key``; raise KeyError if either is absent."""
        found = self._spaces[DataType.HASH].get(key)
        if found is None:
            raise KeyError(key)
        found.delete(field)