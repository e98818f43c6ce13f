import random
from collections import Counter

import pytest

from cpkit.mo import Query, mo_pair_counts


def pairs_in(values, left, right):
    return sum(c // 2 for c in Counter(values[left : right + 1]).values())


@pytest.mark.parametrize("block_size", [1, 3, 350])
def test_random_queries(block_size):
    rng = random.Random(block_size)
    values = [rng.randrange(5) for _ in range(60)]
    queries = []
    for _ in range(80):
        a, b = sorted((rng.randrange(60), rng.randrange(60)))
        queries.append((a, b))
    answers = mo_pair_counts(values, queries, block_size)
    assert answers == [pairs_in(values, l, r) for l, r in queries]


def test_single_position_has_no_pairs():
    values = ["a", "a", "b"]
    assert mo_pair_counts(values, [(0, 0), (1, 1), (2, 2)]) == [0, 0, 0]


def test_whole_range_of_equal_values():
    values = [7] * 9
    assert mo_pair_counts(values, [(0, 8)]) == [len(values) // 2]


def test_no_queries():
    assert mo_pair_counts([1, 2, 3], []) == []


def test_query_sort_key():
    assert Query(700, 5, 0).sort_key(350) < Query(10, 900, 1).sort_key(350) or (
        Query(10, 900, 1).sort_key(350) < Query(700, 5, 0).sort_key(350)
    )
    assert sorted(
        [Query(700, 5, 0), Query(10, 900, 1)], key=lambda q: q.sort_key(350)
    )[0].index == 1


def test_invalid_ranges():
    with pytest.raises(ValueError):
        mo_pair_counts([1, 2], [(1, 0)])
    with pytest.raises(ValueError):
        mo_pair_counts([1, 2], [(0, 2)])
    with pytest.raises(ValueError):
        mo_pair_counts([1, 2], [(0, 1)], block_size=0)