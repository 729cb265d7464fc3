"""Array-based stack with explicit capacity growth."""

from __future__ import annotations

from typing import Any

__all__ = ["Stack", "STACK_CAP_MAX"]

STACK_CAP_MAX = 16 * 1024 * 1024
_UNIT_MIN = 1
_UNIT_MAX = 1024


class Stack:
    """A LIFO stack that reserves capacity in growing steps."""

    def __init__(self, cap: int = 0) -> None:
        if cap < 0:
            raise ValueError("capacity must not be negative")
        self._data: list[Any] = []
        self._cap = 0
        if cap:
            self.grow(cap)

    def __len__(self) -> int:
        return len(self._data)

    def cap(self) -> int:
        """Return the reserved capacity."""
        return self._cap

    def clear(self) -> None:
        """Drop every item and release the capacity."""
        self._data = []
        self._cap = 0

    def grow(self, cap: int) -> None:
        """Reserve room for at least ``cap`` items.

        Raises MemoryError when ``cap`` exceeds ``STACK_CAP_MAX``.
        """
        if cap > STACK_CAP_MAX:
            raise MemoryError(f"stack capacity {cap} exceeds {STACK_CAP_MAX}")
        shortfall = cap - self._cap
        if shortfall <= 0:
            return
        step = min(max(self._cap, _UNIT_MIN), _UNIT_MAX)
        self._cap += -(-shortfall // step) * step

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self.grow(len(self._data) + 1)
        self._data.append(data)

    def _last(self, action: str) -> Any:
        if not self._data:
            raise IndexError(f"{action} an empty stack")
        return self._data[-1]

    def pop(self) -> Any:
        """Remove and return the top item; IndexError when empty."""
        value = self._last("pop from")
        del self._data[-1]
        return value

    def top(self) -> Any:
        """Return the top item without removing it; IndexError when empty."""
        return self._last("top of")