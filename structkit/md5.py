"""MD5 digests and the 32-bit hash derived from them."""

from __future__ import annotations

import hashlib

__all__ = ["md5_signature", "hash_md5"]


def _as_bytes(key: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def md5_signature(key: bytes | bytearray | memoryview | str) -> bytes:
    """Return the 16-byte MD5 digest of ``key`` (str is encoded as UTF-8)."""
    return hashlib.md5(_as_bytes(key), usedforsecurity=False).digest()


def hash_md5(key: bytes | bytearray | memoryview | str) -> int:
    """Return the first four digest bytes of ``key`` as a little-endian uint32."""
    return int.from_bytes(md5_signature(key)[:4], "little")