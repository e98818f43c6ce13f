"""Offline range queries with Mo's ordering: pairs of equal values in a range."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Sequence

DEFAULT_BLOCK_SIZE = 350


@dataclass(frozen=True)
class Query:
    """Inclusive range ``left..right`` with its position in the input."""

    left: int
    right: int
    index: int

    def sort_key(self, block_size: int) -> tuple[int, int]:
        return self.left // block_size, self.right


def mo_pair_counts(
    values: Sequence,
    queries: Iterable[tuple[int, int]],
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> list[int]:
    """For each inclusive range, the sum over values of ``count // 2``."""
    if block_size < 1:
        raise ValueError("block_size must be positive")
    n = len(values)
    pending = []
    for index, (left, right) in enumerate(queries):
        if not 0 <= left <= right < n:
            raise ValueError(f"invalid range ({left}, {right})")
        pending.append(Query(left, right, index))
    pending.sort(key=lambda q: q.sort_key(block_size))

    freq: defaultdict = defaultdict(int)
    result = 0

    def change(i: int, step: int) -> None:
        nonlocal result
        x = values[i]
        result -= freq[x] // 2
        freq[x] += step
        result += freq[x] // 2

    answers = [0] * len(pending)
    cur_left, cur_right = 0, -1
    for q in pending:
        while cur_right < q.right:
            cur_right += 1
            change(cur_right, 1)
        while cur_left > q.left:
            cur_left -= 1
            change(cur_left, 1)
        while cur_left < q.left:
            change(cur_left, -1)
            cur_left += 1
        while cur_right > q.right:
            change(cur_right, -1)
            cur_right -= 1
        answers[q.index] = result
    return answers