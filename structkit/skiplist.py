"""Skip list ordered by score, with an optional score comparator."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

__all__ = [
    "SkipListNode",
    "SkipList",
    "SkipListIterator",
    "SKIPLIST_LEVEL_MAX",
    "SKIPLIST_FACTOR_P",
]

SKIPLIST_LEVEL_MAX = 32
SKIPLIST_FACTOR_P = 0.5

Comparator = Callable[[Any, Any], int]


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _rand_level() -> int:
    level = 1
    while random.getrandbits(16) < SKIPLIST_FACTOR_P * 0xFFFF:
        level += 1
    return min(level, SKIPLIST_LEVEL_MAX)


@dataclass(eq=False)
class SkipListNode:
    """A node holding a score and its data, linked forwards on each level."""

    score: Any
    data: Any = None
    forwards: list[Optional[SkipListNode]] = field(default_factory=list, repr=False)
    backward: Optional[SkipListNode] = field(default=None, repr=False)


class SkipList:
    """Items kept sorted by score; ``cmp(a, b)`` is negative when ``a < b``.

    Items with equal scores may coexist; a new one goes before the others.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._cmp: Comparator = cmp if cmp is not None else _natural_cmp
        self._head = SkipListNode(0, None, [None] * SKIPLIST_LEVEL_MAX)
        self._tail = self._head
        self._level = 1
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        node = self._head.forwards[0]
        while node is not None:
            yield node.score, node.data
            node = node.forwards[0]

    def __reversed__(self) -> Iterator[tuple[Any, Any]]:
        node = self._tail
        while node is not self._head:
            yield node.score, node.data
            node = node.backward  # type: ignore[assignment]

    def level(self) -> int:
        """Return the number of levels in use."""
        return self._level

    def clear(self) -> None:
        """Remove every item."""
        while self._len:
            self.popfirst()

    def _search(self, score: Any) -> list[SkipListNode]:
        update: list[SkipListNode] = [self._head] * SKIPLIST_LEVEL_MAX
        node = self._head
        for i in reversed(range(self._level)):
            while (nxt := node.forwards[i]) is not None and self._cmp(nxt.score, score) < 0:
                node = nxt
            update[i] = node
        return update

    def _shrink(self) -> None:
        while self._level > 1 and self._head.forwards[self._level - 1] is None:
            self._level -= 1

    def _unlink(self, node: SkipListNode, update: list[SkipListNode]) -> Any:
        for i in range(self._level):
            if update[i].forwards[i] is node:
                update[i].forwards[i] = node.forwards[i]
        self._shrink()
        nxt = node.forwards[0]
        if nxt is not None:
            nxt.backward = node.backward
        if node is self._tail:
            self._tail = node.backward  # type: ignore[assignment]
        self._len -= 1
        return node.data

    def push(self, score: Any, data: Any = None) -> None:
        """Insert ``data`` under ``score``."""
        update = self._search(score)
        level = _rand_level()
        if level > self._level:
            for i in range(self._level, level):
                update[i] = self._head
            self._level = level
        node = SkipListNode(score, data, [None] * level)
        for i in range(level):
            node.forwards[i] = update[i].forwards[i]
            update[i].forwards[i] = node
        node.backward = update[0]
        nxt = node.forwards[0]
        if nxt is None:
            self._tail = node
        else:
            nxt.backward = node
        self._len += 1

    def _find(self, score: Any) -> tuple[Optional[SkipListNode], list[SkipListNode]]:
        update = self._search(score)
        node = update[0].forwards[0]
        if node is None or self._cmp(node.score, score) != 0:
            return None, update
        return node, update

    def get(self, score: Any) -> Any:
        """Return the data of the first item with ``score``; KeyError if none."""
        node, _ = self._find(score)
        if node is None:
            raise KeyError(score)
        return node.data

    def pop(self, score: Any) -> Any:
        """Remove the first item with ``score`` and return its data; KeyError if none."""
        node, update = self._find(score)
        if node is None:
            raise KeyError(score)
        return self._unlink(node, update)

    def popfirst(self) -> Any:
        """Remove the lowest-scored item and return its data; IndexError when empty."""
        if not self._len:
            raise IndexError("pop from an empty skiplist")
        node = self._head.forwards[0]
        assert node is not None
        return self._unlink(node, [self._head] * SKIPLIST_LEVEL_MAX)

    def poplast(self) -> Any:
        """Remove the highest-scored item and return its data; IndexError when empty."""
        if not self._len:
            raise IndexError("pop from an empty skiplist")
        tail = self._tail
        update: list[SkipListNode] = [self._head] * SKIPLIST_LEVEL_MAX
        node = self._head
        for i in reversed(range(self._level)):
            while (nxt := node.forwards[i]) is not None and nxt is not tail:
                node = nxt
            update[i] = node
        return self._unlink(tail, update)

    def first(self) -> SkipListNode:
        """Return the lowest-scored node; IndexError when empty."""
        if not self._len:
            raise IndexError("first of an empty skiplist")
        node = self._head.forwards[0]
        assert node is not None
        return node

    def last(self) -> SkipListNode:
        """Return the highest-scored node; IndexError when empty."""
        if not self._len:
            raise IndexError("last of an empty skiplist")
        return self._tail

    def iterator(self) -> SkipListIterator:
        """Return a cursor placed before the first node."""
        return SkipListIterator(self)

    def render(self) -> str:
        """Return one line per level listing the scores linked on it."""
        lines = []
        for i in range(self._level):
            scores = []
            node = self._head.forwards[i]
            while node is not None:
                scores.append(f"{node.score} -> ")
                node = node.forwards[i]
            lines.append(f"Level[{i}]: {''.join(scores)}Nil\n")
        return "".join(lines)


class SkipListIterator:
    """A cursor over a SkipList's nodes that can step both ways."""

    def __init__(self, skiplist: SkipList) -> None:
        self._skiplist = skiplist
        self._node: SkipListNode = skiplist._head

    def __iter__(self) -> SkipListIterator:
        return self

    def __next__(self) -> SkipListNode:
        nxt = self._node.forwards[0]
        if nxt is None:
            raise StopIteration
        self._node = nxt
        return nxt

    def prev(self) -> SkipListNode:
        """Step back one node and return it.

        Raises IndexError when stepping back reaches the start.
        """
        head = self._skiplist._head
        if self._node is head or self._node.backward is None:
            raise IndexError("no previous node")
        self._node = self._node.backward
        if self._node is head:
            raise IndexError("no previous node")
        return self._node

    def rewind(self) -> None:
        """Move the cursor back before the first node."""
        self._node = self._skiplist._head