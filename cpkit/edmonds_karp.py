"""Maximum flow by shortest augmenting paths (Edmonds-Karp)."""

from __future__ import annotations

from collections import deque


class EdmondsKarp:
    """Directed flow network on nodes ``0..n-1`` kept as residual capacities."""

    def __init__(self, n: int, source: int, sink: int) -> None:
        if n < 2:
            raise ValueError("a flow network needs at least two nodes")
        self.n = n
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        self.source = source
        self.sink = sink
        self._cap: list[dict[int, int]] = [{} for _ in range(n)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise ValueError(f"node {v} out of range")

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add capacity ``cap`` on the directed edge ``u -> v``."""
        self._check(u)
        self._check(v)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        self._cap[u][v] = self._cap[u].get(v, 0) + cap
        self._cap[v].setdefault(u, 0)

    def augment(self) -> int:
        """Push flow along one shortest augmenting path; return how much, 0 if none."""
        parent = [-1] * self.n
        parent[self.source] = self.source
        queue = deque([self.source])
        while queue and parent[self.sink] == -1:
            cur = queue.popleft()
            for nxt, residual in self._cap[cur].items():
                if parent[nxt] == -1 and residual > 0:
                    parent[nxt] = cur
                    if nxt == self.sink:
                        break
                    queue.append(nxt)
        if parent[self.sink] == -1:
            return 0
        path = []
        cur = self.sink
        while cur != self.source:
            path.append((parent[cur], cur))
            cur = parent[cur]
        pushed = min(self._cap[u][v] for u, v in path)
        for u, v in path:
            self._cap[u][v] -= pushed
            self._cap[v][u] += pushed
        return pushed

    def max_flow(self) -> int:
        """Augment until no path remains; return the total added."""
        total = 0
        while pushed := self.augment():
            total += pushed
        return total

    def min_cut(self) -> list[bool]:
        """After ``max_flow``: True for nodes reachable from the source."""
        side = [False] * self.n
        side[self.source] = True
        queue = deque([self.source])
        while queue:
            u = queue.popleft()
            for v, residual in self._cap[u].items():
                if not side[v] and residual > 0:
                    side[v] = True
                    queue.append(v)
        return side