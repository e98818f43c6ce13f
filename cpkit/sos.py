"""Sum over subsets."""

from __future__ import annotations

from typing import Sequence


def subset_sums(values: Sequence[int]) -> list[int]:
    """For every mask ``x``, the sum of ``values[i]`` over submasks ``i`` of ``x``."""
    size = len(values)
    if size == 0 or size & (size - 1):
        raise ValueError("the number of values must be a power of two")
    sums = list(values)
    for bit in range(size.bit_length() - 1):
        step = 1 << bit
        sums = [s + sums[mask ^ step] if mask & step else s for mask, s in enumerate(sums)]
    return sums