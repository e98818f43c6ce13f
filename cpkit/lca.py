"""Lowest common ancestor on a rooted tree by binary lifting."""

from __future__ import annotations

from typing import Iterable


class LowestCommonAncestor:
    """Tree on nodes ``0..n-1`` given by undirected edges."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if n < 1:
            raise ValueError("the tree needs at least one node")
        if not 0 <= root < n:
            raise ValueError(f"root {root} out of range")
        adjacency: list[list[int]] = [[] for _ in range(n)]
        edge_count = 0
        for u, v in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"edge ({u}, {v}) out of range")
            adjacency[u].append(v)
            adjacency[v].append(u)
            edge_count += 1
        if edge_count != n - 1:
            raise ValueError("a tree on n nodes has n - 1 edges")

        parent = [-1] * n
        depth = [0] * n
        parent[root] = root
        stack = [root]
        visited = 1
        while stack:
            u = stack.pop()
            for v in adjacency[u]:
                if parent[v] == -1:
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    visited += 1
                    stack.append(v)
        if visited != n:
            raise ValueError("the edges do not connect every node")

        self._depth = depth
        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[p] for p in previous])

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._depth):
            raise IndexError(f"node {u} out of range")

    def depth(self, u: int) -> int:
        """Distance from the root; the root has depth 0."""
        self._check(u)
        return self._depth[u]

    def lca(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        if self._depth[u] > self._depth[v]:
            u, v = v, u
        diff = self._depth[v] - self._depth[u]
        for k, row in enumerate(self._up):
            if diff >> k & 1:
                v = row[v]
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]