"""Persistent segment tree of sums with point-add updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class _Node:
    total: int
    left: "_Node | None" = None
    right: "_Node | None" = None


def _join(left: _Node, right: _Node) -> _Node:
    return _Node(left.total + right.total, left, right)


class PersistentSegmentTree:
    """Every update yields a new version; old versions stay queryable."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("values must not be empty")
        self._n = len(values)
        self._roots = [self._build(values, 0, self._n - 1)]

    def _build(self, values, lo, hi) -> _Node:
        if lo == hi:
            return _Node(values[lo])
        mid = (lo + hi) // 2
        return _join(self._build(values, lo, mid), self._build(values, mid + 1, hi))

    def versions(self) -> int:
        """Number of stored versions; version 0 holds the initial values."""
        return len(self._roots)

    def _root(self, version: int) -> _Node:
        if not 0 <= version < len(self._roots):
            raise IndexError(f"no version {version}")
        return self._roots[version]

    def update(self, version: int, pos: int, delta: int) -> int:
        """Add ``delta`` at ``pos`` on top of ``version``; return the new version."""
        root = self._root(version)
        if not 0 <= pos < self._n:
            raise IndexError(f"position {pos} out of range")
        self._roots.append(self._update(root, pos, delta, 0, self._n - 1))
        return len(self._roots) - 1

    def _update(self, node: _Node, pos, delta, lo, hi) -> _Node:
        if lo == hi:
            return _Node(node.total + delta)
        mid = (lo + hi) // 2
        if pos <= mid:
            return _join(self._update(node.left, pos, delta, lo, mid), node.right)
        return _join(node.left, self._update(node.right, pos, delta, mid + 1, hi))

    def query(self, version: int, left: int, right: int) -> int:
        """Sum over positions ``left..right`` inclusive in ``version``."""
        root = self._root(version)
        if not (0 <= left < self._n and 0 <= right < self._n):
            raise IndexError("query bounds out of range")
        return self._query(root, left, right, 0, self._n - 1)

    def _query(self, node: _Node, left, right, lo, hi) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return node.total
        mid = (lo + hi) // 2
        return self._query(node.left, left, right, lo, mid) + self._query(
            node.right, left, right, mid + 1, hi
        )