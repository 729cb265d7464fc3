"""Array-based binary heap (priority queue) ordered by a comparator."""

from __future__ import annotations

from typing import Any, Callable, Optional

__all__ = ["Heap", "HEAP_CAP_MAX"]

HEAP_CAP_MAX = 16 * 1024 * 1024
_UNIT_MIN = 1
_UNIT_MAX = 1024

Comparator = Callable[[Any, Any], int]


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class Heap:
    """A min-heap: ``cmp(a, b)`` is negative when ``a`` should come first."""

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._cmp: Comparator = cmp if cmp is not None else _natural_cmp
        self._data: list[Any] = []
        self._cap = 0

    def __len__(self) -> int:
        return len(self._data)

    def cap(self) -> int:
        """Return the reserved capacity."""
        return self._cap

    def clear(self) -> None:
        """Drop every item; the capacity is kept."""
        self._data.clear()

    def grow(self, cap: int) -> None:
        """Reserve room for at least ``cap`` items.

        Raises MemoryError when ``cap`` exceeds ``HEAP_CAP_MAX``.
        """
        if cap > HEAP_CAP_MAX:
            raise MemoryError(f"heap capacity {cap} exceeds {HEAP_CAP_MAX}")
        if cap <= self._cap:
            return
        unit = min(max(self._cap, _UNIT_MIN), _UNIT_MAX)
        new_cap = self._cap + unit
        while new_cap < cap:
            new_cap += unit
        self._cap = new_cap

    def push(self, data: Any) -> None:
        """Add ``data`` to the heap."""
        self.grow(len(self._data) + 1)
        self._data.append(data)
        self._siftdown(0, len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest item; IndexError when empty."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        tail = self._data.pop()
        if not self._data:
            return tail
        head = self._data[0]
        self._data[0] = tail
        self._siftup(0)
        return head

    def pushpop(self, data: Any) -> Any:
        """Push ``data`` then pop the smallest item, in one pass."""
        if not self._data:
            return data
        head = self._data[0]
        if self._cmp(head, data) < 0:
            self._data[0] = data
            self._siftup(0)
            return head
        return data

    def top(self) -> Any:
        """Return the smallest item without removing it; IndexError when empty."""
        if not self._data:
            raise IndexError("top of an empty heap")
        return self._data[0]

    def delete(self, idx: int) -> Any:
        """Remove and return the item stored at array position ``idx``."""
        if idx < 0 or idx >= len(self._data):
            raise IndexError(f"heap index {idx} out of range")
        tail = self._data.pop()
        if idx == len(self._data):
            return tail
        data = self._data[idx]
        self._data[idx] = tail
        self._siftup(idx)
        return data

    def replace(self, data: Any) -> Any:
        """Pop the smallest item, then push ``data``; IndexError when empty."""
        if not self._data:
            raise IndexError("replace on an empty heap")
        orig = self._data[0]
        self._data[0] = data
        self._siftup(0)
        return orig

    def _siftdown(self, start_idx: int, idx: int) -> None:
        data = self._data
        item = data[idx]
        while idx > start_idx:
            parent_idx = (idx - 1) >> 1
            parent = data[parent_idx]
            if self._cmp(item, parent) < 0:
                data[idx] = parent
                idx = parent_idx
                continue
            break
        data[idx] = item

    def _siftup(self, idx: int) -> None:
        data = self._data
        length = len(data)
        start_idx = idx
        item = data[idx]
        child_idx = 2 * idx + 1
        while child_idx < length:
            right_idx = child_idx + 1
            if right_idx < length and self._cmp(data[child_idx], data[right_idx]) >= 0:
                child_idx = right_idx
            data[idx] = data[child_idx]
            idx = child_idx
            child_idx = 2 * idx + 1
        data[idx] = item
        self._siftdown(start_idx, idx)