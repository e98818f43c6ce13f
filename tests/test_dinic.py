import random

import pytest

from cpkit.dinic import Dinic


def _brute_min_cut(n, source, sink, edges):
    best = None
    for mask in range(1 << n):
        if not mask >> source & 1 or mask >> sink & 1:
            continue
        cut = sum(c for u, v, c in edges if mask >> u & 1 and not mask >> v & 1)
        best = cut if best is None else min(best, cut)
    return best


def _random_edges(rng, n, count):
    edges = []
    for _ in range(count):
        u, v = rng.sample(range(n), 2)
        edges.append((u, v, rng.randint(0, 9)))
    return edges


def test_chain_limited_by_smallest_edge():
    d = Dinic(3, 0, 2)
    d.add_edge(0, 1, 5, directed=True)
    d.add_edge(1, 2, 3, directed=True)
    assert d.max_flow() == 3


def test_directed_edge_against_flow_carries_nothing():
    d = Dinic(2, 0, 1)
    d.add_edge(1, 0, 4, directed=True)
    assert d.max_flow() == 0


def test_undirected_edge_carries_flow_both_ways():
    d = Dinic(2, 0, 1)
    d.add_edge(1, 0, 4)
    assert d.max_flow() == 4


@pytest.mark.parametrize("seed", range(8))
def test_max_flow_equals_brute_min_cut(seed):
    rng = random.Random(seed)
    n = 6
    edges = _random_edges(rng, n, 12)
    d = Dinic(n, 0, n - 1)
    for u, v, c in edges:
        d.add_edge(u, v, c, directed=True)
    assert d.max_flow() == _brute_min_cut(n, 0, n - 1, edges)


@pytest.mark.parametrize("seed", range(5))
def test_min_cut_capacity_matches_flow(seed):
    rng = random.Random(100 + seed)
    n = 7
    edges = _random_edges(rng, n, 15)
    d = Dinic(n, 0, n - 1)
    for u, v, c in edges:
        d.add_edge(u, v, c, directed=True)
    flow = d.max_flow()
    side = d.min_cut()
    assert side[0] is True
    assert side[n - 1] is False
    assert sum(c for u, v, c in edges if side[u] and not side[v]) == flow


@pytest.mark.parametrize("seed", range(5))
def test_undirected_matches_brute_cut_in_both_directions(seed):
    rng = random.Random(200 + seed)
    n = 5
    edges = _random_edges(rng, n, 8)
    d = Dinic(n, 0, n - 1)
    for u, v, c in edges:
        d.add_edge(u, v, c)
    both = edges + [(v, u, c) for u, v, c in edges]
    assert d.max_flow() == _brute_min_cut(n, 0, n - 1, both)


def test_second_call_adds_nothing():
    d = Dinic(3, 0, 2)
    d.add_edge(0, 1, 2, directed=True)
    d.add_edge(1, 2, 2, directed=True)
    first = d.max_flow()
    assert first == 2
    assert d.max_flow() == 0


def test_errors():
    with pytest.raises(ValueError):
        Dinic(3, 1, 1)
    with pytest.raises(ValueError):
        Dinic(3, 0, 3)
    d = Dinic(3, 0, 2)
    with pytest.raises(ValueError):
        d.add_edge(0, 1, -1)
    with pytest.raises(ValueError):
        d.add_edge(0, 5, 1)