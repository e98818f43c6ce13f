"""Minimum-cost flow by successive shortest paths."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Edge:
    """Directed edge ``start -> end``."""

    start: int
    end: int
    capacity: int
    cost: int


def _shortest_paths(n, source, adj, capacity, cost):
    dist = [math.inf] * n
    parent = [-1] * n
    in_queue = [False] * n
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        in_queue[u] = False
        for v in adj[u]:
            if capacity[u][v] > 0 and dist[v] > dist[u] + cost[u][v]:
                dist[v] = dist[u] + cost[u][v]
                parent[v] = u
                if not in_queue[v]:
                    in_queue[v] = True
                    queue.append(v)
    return dist, parent


def min_cost_flow(n: int, edges: Iterable[Edge], k: int, source: int, sink: int) -> int:
    """Cheapest cost of sending ``k`` units from ``source`` to ``sink``.

    At most one edge is kept per ordered pair of nodes: a later edge between
    the same nodes replaces the earlier one. Raises ``ValueError`` when fewer
    than ``k`` units can be sent.
    """
    for v in (source, sink):
        if not 0 <= v < n:
            raise ValueError(f"node {v} out of range")
    if k < 0:
        raise ValueError("k must be non-negative")
    adj: list[list[int]] = [[] for _ in range(n)]
    cost: list[defaultdict[int, int]] = [defaultdict(int) for _ in range(n)]
    capacity: list[defaultdict[int, int]] = [defaultdict(int) for _ in range(n)]
    for e in edges:
        if not (0 <= e.start < n and 0 <= e.end < n):
            raise ValueError(f"edge {e} out of range")
        adj[e.start].append(e.end)
        adj[e.end].append(e.start)
        cost[e.start][e.end] = e.cost
        cost[e.end][e.start] = -e.cost
        capacity[e.start][e.end] = e.capacity

    flow = 0
    total_cost = 0
    while flow < k:
        dist, parent = _shortest_paths(n, source, adj, capacity, cost)
        if dist[sink] == math.inf:
            break
        path = []
        cur = sink
        while cur != source:
            path.append((parent[cur], cur))
            cur = parent[cur]
        pushed = min([k - flow] + [capacity[u][v] for u, v in path])
        flow += pushed
        total_cost += pushed * dist[sink]
        for u, v in path:
            capacity[u][v] -= pushed
            capacity[v][u] += pushed
    if flow < k:
        raise ValueError(f"only {flow} of {k} units can reach the sink")
    return total_cost