"""Sorted sets: names ordered by score, kept in a skip list."""

from __future__ import annotations

import math
import random
from typing import Iterator

MAX_LEVEL = 3


class _Node:
    __slots__ = ("name", "score", "forward")

    def __init__(self, score: float, name: str) -> None:
        self.name = name
        self.score = score
        self.forward: list[_Node | None] = [None] * (MAX_LEVEL + 1)


def _index_range(length: int, start: int, stop: int) -> range:
    """Resolve inclusive, possibly negative, bounds against ``length``."""
    if start < 0:
        start += length
    if start < 0:
        start = 0
    if stop < 0:
        stop += length
    if length <= start or stop < start:
        return range(0)
    return range(start, min(stop, length - 1) + 1)


class SortedSet:
    """Names ordered by ascending score; each score is held by one name at most."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._head = _Node(-math.inf, "")
        self._level = 0
        self._len = 0

    def _random_level(self) -> int:
        level = 0
        while level < MAX_LEVEL and self._rng.random() < 0.5:
            level += 1
        return level

    def _predecessors(self, score: float) -> list[_Node]:
        """Return, per level, the last node whose score is below ``score``."""
        update = [self._head] * (MAX_LEVEL + 1)
        current = self._head
        for level in range(self._level, -1, -1):
            while (nxt := current.forward[level]) is not None and nxt.score < score:
                current = nxt
            update[level] = current
        return update

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.forward[0]
        while node is not None:
            yield node
            node = node.forward[0]

    def _scan(self, minimum: float, maximum: float) -> Iterator[_Node]:
        node = self._predecessors(minimum)[0].forward[0]
        while node is not None and node.score <= maximum:
            yield node
            node = node.forward[0]

    def _shrink(self) -> None:
        while self._level > 0 and self._head.forward[self._level] is None:
            self._level -= 1

    def add(self, score: float, name: str) -> bool:
        """Insert ``name`` with ``score``; return False if the score is already taken."""
        update = self._predecessors(score)
        following = update[0].forward[0]
        if following is not None and following.score == score:
            return False
        level = self._random_level()
        if level > self._level:
            self._level = level
        node = _Node(score, name)
        for i in range(level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._len += 1
        return True

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[tuple[str, float]]:
        """Yield (name, score) pairs in ascending score order."""
        for node in self._nodes():
            yield node.name, node.score

    def count(self, minimum: float, maximum: float) -> int:
        """Return how many members have a score within [minimum, maximum]."""
        return sum(1 for _ in self._scan(minimum, maximum))

    def range(self, start: int, stop: int) -> list[tuple[int, str]]:
        """Return (index, name) pairs for the inclusive index range."""
        indices = _index_range(self._len, start, stop)
        return [
            (index, node.name)
            for index, node in enumerate(self._nodes())
            if index in indices
        ]

    def range_by_score(self, minimum: float, maximum: float) -> list[tuple[int, float, str]]:
        """Return (position, score, name) rows for scores within [minimum, maximum]."""
        return [
            (index, node.score, node.name)
            for index, node in enumerate(self._scan(minimum, maximum))
        ]

    def rank(self, name: str) -> int:
        """Return the position of ``name``; raise KeyError if it is not a member."""
        for index, node in enumerate(self._nodes()):
            if node.name == name:
                return index
        raise KeyError(name)

    def remove(self, name: str) -> bool:
        """Remove the member called ``name``; return whether it was present."""
        target = next((node for node in self._nodes() if node.name == name), None)
        if target is None:
            return False
        for level in range(self._level + 1):
            pred = self._head
            while (nxt := pred.forward[level]) is not None and nxt is not target:
                pred = nxt
            if pred.forward[level] is target:
                pred.forward[level] = target.forward[level]
        self._len -= 1
        self._shrink()
        return True

    def remove_range_by_score(self, minimum: float, maximum: float) -> int:
        """Remove members with scores within [minimum, maximum]; return how many."""
        update = self._predecessors(minimum)
        node = update[0].forward[0]
        removed = 0
        while node is not None and node.score <= maximum:
            for level in range(self._level + 1):
                if update[level].forward[level] is node:
                    update[level].forward[level] = node.forward[level]
            removed += 1
            node = node.forward[0]
        self._len -= removed
        self._shrink()
        return removed