"""First-in, first-out queue over a linked list."""

from __future__ import annotations

from typing import Any, Iterator

from structkit.linkedlist import LinkedList

__all__ = ["Queue"]


class Queue:
    """A first-in, first-out queue with O(1) push and pop."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def push(self, data: Any) -> None:
        """Add ``data`` at the back."""
        self._items.rpush(data)

    def pop(self) -> Any:
        """Remove and return the front item; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.lpop()

    def top(self) -> Any:
        """Return the front item without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty queue")
        return self._items.head()