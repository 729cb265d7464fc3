"""Doubly linked list with a movable cursor."""

from __future__ import annotations

from typing import Any, Iterator, Optional

__all__ = ["LinkedList", "ListIterator"]

# A node's links and the list's ends share one indexing: the head end is
# reached by following "prev" links, the tail end by following "next" links.
_PREV = _HEAD = 0
_NEXT = _TAIL = 1


class _Node:
    __slots__ = ("data", "links")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.links: list[Optional[_Node]] = [None, None]


def _walk(node: Optional[_Node], direction: int) -> Iterator[Any]:
    while node is not None:
        yield node.data
        node = node.links[direction]


class LinkedList:
    """A doubly linked list with O(1) pushes and pops at both ends."""

    def __init__(self) -> None:
        self._ends: list[Optional[_Node]] = [None, None]
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._ends[_HEAD], _NEXT)

    def __reversed__(self) -> Iterator[Any]:
        return _walk(self._ends[_TAIL], _PREV)

    def clear(self) -> None:
        """Remove every item."""
        while self._len:
            self.lpop()

    def _push(self, data: Any, side: int) -> None:
        node = _Node(data)
        end = self._ends[side]
        if end is None:
            self._ends[1 - side] = node
        else:
            end.links[side] = node
            node.links[1 - side] = end
        self._ends[side] = node
        self._len += 1

    def _pop(self, side: int) -> Any:
        end = self._ends[side]
        if end is None:
            raise IndexError("pop from an empty list")
        inner = end.links[1 - side]
        self._ends[side] = inner
        if inner is None:
            self._ends[1 - side] = None
        else:
            inner.links[side] = None
        end.links[1 - side] = None
        self._len -= 1
        return end.data

    def _peek(self, side: int, what: str) -> Any:
        end = self._ends[side]
        if end is None:
            raise IndexError(f"{what} of an empty list")
        return end.data

    def lpush(self, data: Any) -> None:
        """Insert ``data`` at the head."""
        self._push(data, _HEAD)

    def rpush(self, data: Any) -> None:
        """Append ``data`` at the tail."""
        self._push(data, _TAIL)

    push = rpush

    def lpop(self) -> Any:
        """Remove and return the head item; IndexError when empty."""
        return self._pop(_HEAD)

    pop = lpop

    def rpop(self) -> Any:
        """Remove and return the tail item; IndexError when empty."""
        return self._pop(_TAIL)

    def head(self) -> Any:
        """Return the head item; IndexError when empty."""
        return self._peek(_HEAD, "head")

    def tail(self) -> Any:
        """Return the tail item; IndexError when empty."""
        return self._peek(_TAIL, "tail")

    def iterator(self) -> ListIterator:
        """Return a cursor positioned at the head."""
        return ListIterator(self)


class ListIterator:
    """A cursor over a LinkedList that can move both ways and be repositioned."""

    def __init__(self, lst: LinkedList) -> None:
        self._list = lst
        self._node: Optional[_Node] = lst._ends[_HEAD]

    def __iter__(self) -> ListIterator:
        return self

    def _advance(self, direction: int, error: BaseException) -> Any:
        node = self._node
        if node is None:
            raise error
        self._node = node.links[direction]
        return node.data

    def __next__(self) -> Any:
        return self._advance(_NEXT, StopIteration())

    def prev(self) -> Any:
        """Return the current item and step towards the head.

        Raises IndexError once the cursor has moved past the head.
        """
        return self._advance(_PREV, IndexError("iterator has no current item"))

    def seek_head(self) -> None:
        """Move the cursor to the head."""
        self._node = self._list._ends[_HEAD]

    def seek_tail(self) -> None:
        """Move the cursor to the tail."""
        self._node = self._list._ends[_TAIL]