"""Open-addressing hash table with linear probing and DJBX33A hashing."""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple, Optional, Union

__all__ = ["HashMap", "MAP_CAP_MAX", "MAP_CAP_INIT", "MAP_LOAD_LIMIT"]

MAP_LOAD_LIMIT = 0.72
MAP_CAP_MAX = 1024 * 1024 * 1024
MAP_CAP_INIT = 16

Key = Union[str, bytes]

_MISSING = object()


def _key_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"map keys must be str or bytes, not {type(key).__name__}")


def _djb_hash(raw: bytes) -> int:
    """DJBX33A over signed bytes, kept to 32 bits."""
    h = 5381
    for b in raw:
        h = (h * 33 + (b - 256 if b >= 128 else b)) & 0xFFFFFFFF
    return h


class _Slot(NamedTuple):
    raw: bytes
    hash: int
    key: Key
    val: Any


class HashMap:
    """A mapping from str/bytes keys to values, sized in powers of two.

    Keys compare by their bytes, so ``"a"`` and ``b"a"`` are the same key.
    """

    def __init__(self) -> None:
        self._table: Optional[list[Optional[_Slot]]] = None
        self._cap = 0
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def cap(self) -> int:
        """Return the number of table slots."""
        return self._cap

    def clear(self) -> None:
        """Drop every entry and release the table."""
        self._table = None
        self._cap = 0
        self._len = 0

    def _resize(self) -> None:
        cap = self._cap * 2
        if cap < 1:
            cap = MAP_CAP_INIT
        if cap > MAP_CAP_MAX:
            raise MemoryError(f"map capacity {cap} exceeds {MAP_CAP_MAX}")
        table: list[Optional[_Slot]] = [None] * cap
        mask = cap - 1
        for slot in self._table or ():
            if slot is None:
                continue
            j = slot.hash & mask
            while table[j] is not None:
                j = (j + 1) & mask
            table[j] = slot
        self._table = table
        self._cap = cap

    def _find(self, raw: bytes) -> int:
        """Return the slot index holding ``raw``, or -1."""
        table = self._table
        if not table:
            return -1
        mask = self._cap - 1
        i = _djb_hash(raw) & mask
        while (slot := table[i]) is not None:
            if slot.raw == raw:
                return i
            i = (i + 1) & mask
        return -1

    def __setitem__(self, key: Key, val: Any) -> None:
        raw = _key_bytes(key)
        if self._cap * MAP_LOAD_LIMIT < self._len or self._cap < MAP_CAP_INIT:
            self._resize()
        table = self._table
        assert table is not None
        mask = self._cap - 1
        h = _djb_hash(raw)
        i = h & mask
        while True:
            slot = table[i]
            if slot is None:
                table[i] = _Slot(raw, h, key, val)
                self._len += 1
                return
            if slot.raw == raw:
                table[i] = slot._replace(val=val)
                return
            i = (i + 1) & mask

    def __getitem__(self, key: Key) -> Any:
        idx = self._find(_key_bytes(key))
        if idx < 0:
            raise KeyError(key)
        slot = self._table[idx]  # type: ignore[index]
        return slot.val

    def __contains__(self, key: object) -> bool:
        try:
            raw = _key_bytes(key)  # type: ignore[arg-type]
        except TypeError:
            return False
        return self._find(raw) >= 0

    def __iter__(self) -> Iterator[Key]:
        for key, _ in self.items():
            yield key

    def get(self, key: Key, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        idx = self._find(_key_bytes(key))
        if idx < 0:
            return default
        return self._table[idx].val  # type: ignore[index]

    def pop(self, key: Key, *args: Any) -> Any:
        """Remove ``key`` and return its value.

        With a default given, return it when the key is absent; otherwise
        raise KeyError.
        """
        if len(args) > 1:
            raise TypeError(f"pop expected at most 2 arguments, got {1 + len(args)}")
        idx = self._find(_key_bytes(key))
        if idx < 0:
            if args:
                return args[0]
            raise KeyError(key)
        table = self._table
        assert table is not None
        val = table[idx].val  # type: ignore[union-attr]
        self._remove_at(table, idx)
        self._len -= 1
        return val

    def _remove_at(self, table: list[Optional[_Slot]], i: int) -> None:
        # Backward-shift deletion keeps every probe chain intact.
        mask = self._cap - 1
        table[i] = None
        j = i
        while True:
            j = (j + 1) & mask
            slot = table[j]
            if slot is None:
                return
            k = slot.hash & mask
            if (i < j and (k <= i or k > j)) or (i > j and k <= i and k > j):
                table[i] = slot
                table[j] = None
                i = j

    def items(self) -> Iterator[tuple[Key, Any]]:
        """Yield ``(key, value)`` pairs in table order."""
        for slot in self._table or ():
            if slot is not None:
                yield slot.key, slot.val