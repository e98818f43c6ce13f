import random

import pytest

from cpkit.edmonds_karp import EdmondsKarp


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


def _network(n, edges):
    ek = EdmondsKarp(n, 0, n - 1)
    for u, v, c in edges:
        ek.add_edge(u, v, c)
    return ek


def test_single_edge():
    ek = EdmondsKarp(2, 0, 1)
    ek.add_edge(0, 1, 7)
    assert ek.max_flow() == 7


def test_parallel_capacities_accumulate():
    ek = EdmondsKarp(2, 0, 1)
    ek.add_edge(0, 1, 2)
    ek.add_edge(0, 1, 5)
    assert ek.max_flow() == 7


def test_no_path_gives_zero():
    ek = EdmondsKarp(3, 0, 2)
    ek.add_edge(2, 0, 4)
    assert ek.augment() == 0
    assert ek.max_flow() == 0


@pytest.mark.parametrize("seed", range(8))
def test_max_flow_equals_brute_min_cut(seed):
    rng = random.Random(seed)
    n = 6
    edges = _random_edges(rng, n, 12)
    assert _network(n, edges).max_flow() == _brute_min_cut(n, 0, n - 1, edges)


@pytest.mark.parametrize("seed", range(5))
def test_augments_sum_to_max_flow(seed):
    rng = random.Random(50 + seed)
    n = 6
    edges = _random_edges(rng, n, 12)
    ek = _network(n, edges)
    pushes = []
    while pushed := ek.augment():
        pushes.append(pushed)
    assert all(p > 0 for p in pushes)
    assert sum(pushes) == _network(n, edges).max_flow()


@pytest.mark.parametrize("seed", range(5))
def test_min_cut_capacity_matches_flow(seed):
    rng = random.Random(300 + seed)
    n = 7
    edges = _random_edges(rng, n, 15)
    ek = _network(n, edges)
    flow = ek.max_flow()
    side = ek.min_cut()
    assert side[0] and not side[n - 1]
    assert sum(c for u, v, c in edges if side[u] and not side[v]) == flow


def test_errors():
    with pytest.raises(ValueError):
        EdmondsKarp(4, 2, 2)
    with pytest.raises(ValueError):
        EdmondsKarp(1, 0, 0)
    ek = EdmondsKarp(3, 0, 2)
    with pytest.raises(ValueError):
        ek.add_edge(0, 3, 1)
    with pytest.raises(ValueError):
        ek.add_edge(0, 1, -2)