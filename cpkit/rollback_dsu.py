"""Disjoint-set union with parity tracking and undo."""

from __future__ import annotations


class RollbackDSU:
    """Union by size without path compression, so unions can be undone.

    Each node stores the parity of its distance to its parent, which lets
    ``unite`` detect when an edge breaks bipartiteness.
    """

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._parity = [0] * n
        self._size = [1] * n
        self._connected = n
        self._changes: list[int | None] = []

    def find(self, x: int) -> tuple[int, int]:
        """Return ``(root, parity of the path from x to root)``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"node {x} out of range")
        parity = 0
        while self._parent[x] != x:
            parity ^= self._parity[x]
            x = self._parent[x]
        return x, parity

    def unite(self, u: int, v: int) -> bool:
        """Add edge ``u``-``v``; return True if it closes an odd cycle.

        An edge that closes an odd cycle is not recorded, so ``undo`` skips it.
        """
        root_u, parity_u = self.find(u)
        root_v, parity_v = self.find(v)
        if root_u == root_v:
            if parity_u == parity_v:
                return True
            self._changes.append(None)
            return False
        self._connected -= 1
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._parity[root_v] = 1 ^ parity_u ^ parity_v
        self._size[root_u] += self._size[root_v]
        self._changes.append(root_v)
        return False

    def undo(self) -> None:
        """Revert the last recorded ``unite``; does nothing if there is none."""
        if not self._changes:
            return
        child = self._changes.pop()
        if child is None:
            return
        self._size[self._parent[child]] -= self._size[child]
        self._parent[child] = child
        self._parity[child] = 0
        self._connected += 1

    def components(self) -> int:
        """Number of connected components."""
        return self._connected