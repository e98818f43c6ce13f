import random

import pytest

from cpkit.lca import LowestCommonAncestor

PARENTS = {1: 0, 2: 0, 3: 1, 4: 1, 5: 2, 6: 3, 7: 3, 8: 6, 9: 5}


def ancestors(node, root=0):
    chain = [node]
    while node != root:
        node = PARENTS[node]
        chain.append(node)
    return chain


@pytest.fixture
def tree():
    return LowestCommonAncestor(10, [(p, c) for c, p in PARENTS.items()])


def test_depths(tree):
    for node in range(10):
        assert tree.depth(node) == len(ancestors(node)) - 1


def test_lca_all_pairs(tree):
    for u in range(10):
        for v in range(10):
            chain_v = set(ancestors(v))
            expected = next(a for a in ancestors(u) if a in chain_v)
            assert tree.lca(u, v) == expected


def test_other_root():
    edges = [(c, p) for c, p in PARENTS.items()]
    tree = LowestCommonAncestor(10, edges, root=8)
    assert tree.depth(8) == 0
    assert tree.lca(0, 8) == 8
    assert tree.lca(4, 9) == 1


def test_long_path_and_random_tree():
    n = 200
    rng = random.Random(7)
    parents = {c: rng.randrange(c) for c in range(1, n)}
    tree = LowestCommonAncestor(n, parents.items())

    def chain(x):
        out = [x]
        while x:
            x = parents[x]
            out.append(x)
        return out

    for _ in range(300):
        u, v = rng.randrange(n), rng.randrange(n)
        cv = set(chain(v))
        assert tree.lca(u, v) == next(a for a in chain(u) if a in cv)


def test_single_node():
    tree = LowestCommonAncestor(1, [])
    assert tree.lca(0, 0) == 0


def test_invalid_trees():
    with pytest.raises(ValueError):
        LowestCommonAncestor(3, [(0, 1)])
    with pytest.raises(ValueError):
        LowestCommonAncestor(4, [(0, 1), (1, 0), (2, 3)])
    with pytest.raises(ValueError):
        LowestCommonAncestor(2, [(0, 5)])


def test_node_out_of_range(tree):
    with pytest.raises(IndexError):
        tree.lca(0, 10)