"""Ketama consistent hashing."""

from __future__ import annotations

import bisect
import dataclasses
from dataclasses import dataclass
from typing import Any, Iterable

from .md5 import hash_md5, md5_signature

__all__ = ["KetamaNode", "KetamaRing"]

_POINTS_PER_HASH = 4
_HASHES_PER_WEIGHT = 40


@dataclass
class KetamaNode:
    """A server on the ring, or one of its points once placed on the ring."""

    key: str
    weight: int = 1
    data: Any = None
    idata: int = 0
    idx: int = 0
    hash: int = 0


class KetamaRing:
    """A hash ring with ``160 * weight`` points for every node."""

    def __init__(self, nodes: Iterable[KetamaNode]) -> None:
        points: list[KetamaNode] = []
        for i, node in enumerate(nodes):
            if node.weight < 0:
                raise ValueError(f"node {node.key!r} has a negative weight")
            for j in range(node.weight * _HASHES_PER_WEIGHT):
                digest = md5_signature(f"{node.key}-{j}")
                for n in range(_POINTS_PER_HASH):
                    value = int.from_bytes(digest[n * 4 : n * 4 + 4], "little")
                    points.append(dataclasses.replace(node, idx=i, hash=value))
        points.sort(key=lambda point: point.hash)
        self.nodes: list[KetamaNode] = points
        self._hashes = [point.hash for point in points]

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, key: str | bytes) -> KetamaNode | None:
        """Return the ring point that owns ``key``, or None on an empty ring."""
        if not self.nodes:
            return None
        if len(self.nodes) == 1:
            return self.nodes[0]
        pos = bisect.bisect_left(self._hashes, hash_md5(key))
        if pos == len(self.nodes):
            return self.nodes[0]
        return self.nodes[pos]