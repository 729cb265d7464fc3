"""String search, random strings and substring replacement."""

from __future__ import annotations

import random
import string
from typing import TypeVar

__all__ = ["search", "rand_string", "replace"]

_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

S = TypeVar("S", str, bytes)


def search(s: S, sub: S, start: int = 0) -> int:
    """Find ``sub`` in ``s`` from ``start`` with Boyer-Moore bad-character skips.

    Returns the first position of ``sub``, or ``len(s)`` when it is absent.
    Works on ``str`` (character positions) and ``bytes`` (byte positions).
    """
    s_len = len(s)
    m = len(sub)
    if start >= s_len:
        return s_len
    if m == 0:
        return start

    last = m - 1
    table = {ch: last - idx for idx, ch in enumerate(sub)}

    i = start
    while i <= s_len - m:
        skip = 0
        for j in range(m):
            k = last - j
            if sub[k] != s[i + k]:
                t = table.get(s[i + k], m)
                skip = t - j if t > j else 1
                break
        if skip == 0:
            return i
        i += skip
    return s_len


def rand_string(length: int) -> str:
    """Return a random string of ``length`` ASCII letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(_ALPHABET, k=length))


def replace(src: S, sub: S, rep: S) -> S:
    """Return ``src`` with every occurrence of ``sub`` replaced by ``rep``."""
    if len(sub) == 0:
        raise ValueError("substring to replace must not be empty")

    src_len = len(src)
    parts = []
    start = 0
    while (idx := search(src, sub, start)) < src_len:
        parts.append(src[start:idx])
        parts.append(rep)
        start = idx + len(sub)
    parts.append(src[start:])
    return src[:0].join(parts)