"""Maximum flow by Dinic's algorithm, with the minimum cut it implies."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

FLOW_INF = 10**8


@dataclass(slots=True)
class _FlowEdge:
    tail: int
    head: int
    cap: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.cap - self.flow


class Dinic:
    """Flow network on nodes ``0..n-1`` with a fixed source and sink."""

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
        self._edges: list[_FlowEdge] = []
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise ValueError(f"node {v} out of range")

    def add_edge(self, v: int, u: int, cap: int, directed: bool = False) -> None:
        """Add an edge ``v -> u``; an undirected edge carries ``cap`` both ways."""
        self._check(v)
        self._check(u)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        m = len(self._edges)
        self._edges.append(_FlowEdge(v, u, cap))
        self._edges.append(_FlowEdge(u, v, 0 if directed else cap))
        self._adj[v].append(m)
        self._adj[u].append(m + 1)

    def _levels(self) -> list[int]:
        level = [-1] * self.n
        level[self.source] = 0
        queue = deque([self.source])
        while queue:
            v = queue.popleft()
            for eid in self._adj[v]:
                edge = self._edges[eid]
                if edge.residual > 0 and level[edge.head] == -1:
                    level[edge.head] = level[v] + 1
                    queue.append(edge.head)
        return level

    def _blocking_flow(self, level: list[int]) -> int:
        ptr = [0] * self.n
        total = 0
        path: list[int] = []
        v = self.source
        while True:
            if v == self.sink:
                pushed = min([FLOW_INF] + [self._edges[eid].residual for eid in path])
                for eid in path:
                    self._edges[eid].flow += pushed
                    self._edges[eid ^ 1].flow -= pushed
                total += pushed
                path.clear()
                v = self.source
                continue
            adj = self._adj[v]
            advanced = False
            while ptr[v] < len(adj):
                eid = adj[ptr[v]]
                edge = self._edges[eid]
                if edge.residual > 0 and level[edge.head] == level[v] + 1:
                    path.append(eid)
                    v = edge.head
                    advanced = True
                    break
                ptr[v] += 1
            if advanced:
                continue
            if v == self.source:
                return total
            eid = path.pop()
            v = self._edges[eid].tail
            ptr[v] += 1

    def max_flow(self) -> int:
        """Push as much flow as possible and return the amount added."""
        total = 0
        while True:
            level = self._levels()
            if level[self.sink] == -1:
                return total
            total += self._blocking_flow(level)

    def min_cut(self) -> list[bool]:
        """After ``max_flow``: True for nodes on the source side of the cut."""
        side = [False] * self.n
        side[self.source] = True
        queue = deque([self.source])
        while queue:
            v = queue.popleft()
            for eid in self._adj[v]:
                edge = self._edges[eid]
                if not side[edge.head] and edge.residual > 0:
                    side[edge.head] = True
                    queue.append(edge.head)
        return side