from itertools import combinations
from functools import reduce

import pytest

from cpkit.xor_basis import XorBasis

VALUES = [6, 9, 15, 3, 12, 5]


def span(values):
    reachable = {0}
    for v in values:
        reachable |= {a ^ v for a in reachable}
    return reachable


def subset_xors(values):
    for size in range(len(values) + 1):
        for combo in combinations(values, size):
            yield reduce(lambda a, b: a ^ b, combo, 0)


@pytest.fixture
def basis():
    xb = XorBasis()
    for v in VALUES:
        xb.add(v)
    return xb


def test_rank_matches_span_size(basis):
    assert 1 << basis.rank() == len(span(VALUES))


def test_possible(basis):
    reachable = span(VALUES)
    for x in range(32):
        assert basis.possible(x) == (x in reachable)


def test_max_and_min(basis):
    reachable = span(VALUES)
    assert basis.max_xor() == max(reachable)
    assert basis.min_xor() == 0
    for x in (1, 16, 31):
        assert basis.max_xor(x) == max(x ^ s for s in reachable)
        assert basis.min_xor(x) == min(x ^ s for s in reachable)


def test_count_subsets(basis):
    xors = list(subset_xors(VALUES))
    for x in range(20):
        assert basis.count_subsets(x) == xors.count(x)


def test_kth_enumerates_span_in_order(basis):
    ordered = [basis.kth(k) for k in range(1, (1 << basis.rank()) + 1)]
    assert ordered == sorted(span(VALUES))


def test_kth_out_of_range(basis):
    with pytest.raises(IndexError):
        basis.kth((1 << basis.rank()) + 1)
    with pytest.raises(IndexError):
        basis.kth(0)


def test_sum_of_all_single_value():
    xb = XorBasis()
    assert xb.sum_of_all() == 0
    xb.add(13)
    assert xb.sum_of_all() == 13


def test_clear(basis):
    basis.clear()
    assert basis.rank() == 0
    assert basis.count == 0
    assert basis.max_xor() == 0


def test_count_subsets_respects_modulus():
    xb = XorBasis(modulus=7)
    for _ in range(10):
        xb.add(0)
    assert xb.count_subsets(0) == pow(2, 10, 7)