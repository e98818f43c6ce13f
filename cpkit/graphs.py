"""Directed graph algorithms: negative cycles, Euler paths, strong components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class WeightedEdge:
    """Directed edge ``start -> end`` with a cost."""

    start: int
    end: int
    cost: int


@dataclass
class EulerPath:
    """Nodes visited in order and the indices of the edges taken between them."""

    nodes: list[int] = field(default_factory=list)
    edges: list[int] = field(default_factory=list)


def _check_node(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise ValueError(f"node {v} out of range")


def find_negative_cycle(
    n: int, edges: Sequence[WeightedEdge], start: int
) -> list[int] | None:
    """A negative cycle reachable from ``start``, as nodes with the first repeated last.

    Returns None when no such cycle exists.
    """
    _check_node(start, n)
    for e in edges:
        _check_node(e.start, n)
        _check_node(e.end, n)
    dist = [math.inf] * n
    dist[start] = 0
    parent = [-1] * n
    last = -1
    for _ in range(n):
        last = -1
        for e in edges:
            if dist[e.start] < math.inf and dist[e.end] > dist[e.start] + e.cost:
                dist[e.end] = dist[e.start] + e.cost
                parent[e.end] = e.start
                last = e.end
    if last == -1:
        return None
    y = last
    for _ in range(n):
        y = parent[y]
    cycle = [y]
    cur = parent[y]
    while True:
        cycle.append(cur)
        if cur == y:
            break
        cur = parent[cur]
    cycle.reverse()
    return cycle


def euler_path(n: int, edges: Sequence[tuple[int, int]]) -> EulerPath:
    """A path using every directed edge exactly once.

    Raises ``ValueError`` when the degrees rule one out or the edges are not
    connected.
    """
    adj: list[list[int]] = [[] for _ in range(n)]
    out_deg = [0] * n
    in_deg = [0] * n
    for i, (u, v) in enumerate(edges):
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(i)
        out_deg[u] += 1
        in_deg[v] += 1
    if not edges:
        return EulerPath()

    begin = finish = -1
    for v, (out_d, in_d) in enumerate(zip(out_deg, in_deg)):
        diff = out_d - in_d
        if diff == 1 and begin == -1:
            begin = v
        elif diff == -1 and finish == -1:
            finish = v
        elif diff != 0:
            raise ValueError("the degrees do not allow an Euler path")
    if begin == -1:
        begin = edges[0][0]

    ptr = [0] * n
    nodes: list[int] = []
    used: list[int] = []
    stack: list[tuple[int, int | None]] = [(begin, None)]
    while stack:
        u, incoming = stack[-1]
        if ptr[u] < len(adj[u]):
            e = adj[u][ptr[u]]
            ptr[u] += 1
            stack.append((edges[e][1], e))
        else:
            stack.pop()
            nodes.append(u)
            if incoming is not None:
                used.append(incoming)
    if len(used) != len(edges):
        raise ValueError("the edges are not connected")
    nodes.reverse()
    used.reverse()
    return EulerPath(nodes, used)


def strongly_connected_components(
    n: int, edges: Sequence[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components by Kosaraju's two passes."""
    adj: list[list[int]] = [[] for _ in range(n)]
    radj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append(v)
        radj[v].append(u)

    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for w in neighbours:
                if not visited[w]:
                    visited[w] = True
                    stack.append((w, iter(adj[w])))
                    break
            else:
                stack.pop()
                order.append(u)

    assigned = [False] * n
    components: list[list[int]] = []
    for root in reversed(order):
        if assigned[root]:
            continue
        assigned[root] = True
        component = [root]
        stack = [iter(radj[root])]
        while stack:
            for w in stack[-1]:
                if not assigned[w]:
                    assigned[w] = True
                    component.append(w)
                    stack.append(iter(radj[w]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components