"""Suffix array by prefix doubling, with the LCP array of adjacent suffixes."""

from __future__ import annotations


class SuffixArray:
    """``sa`` lists suffix start positions in sorted order; ``lcp[i]`` is the
    longest common prefix of the suffixes at ``sa[i]`` and ``sa[i + 1]``."""

    def __init__(self, s: str) -> None:
        self.s = s
        n = len(s)
        self.sa = list(range(n))
        rank = [ord(ch) for ch in s]
        k = 1
        while k < n:
            def key(i: int, rank=rank, k=k) -> tuple[int, int]:
                return rank[i], rank[i + k] if i + k < n else -1

            self.sa.sort(key=key)
            new_rank = [0] * n
            current = 0
            for prev, cur in zip(self.sa, self.sa[1:]):
                if key(cur) != key(prev):
                    current += 1
                new_rank[cur] = current
            rank = new_rank
            if current == n - 1:
                break
            k <<= 1
        self.rank = [0] * n
        for position, start in enumerate(self.sa):
            self.rank[start] = position
        self.lcp = self._build_lcp()

    def _build_lcp(self) -> list[int]:
        s, n = self.s, len(self.s)
        lcp = [0] * max(0, n - 1)
        k = 0
        for i in range(n):
            position = self.rank[i]
            if position == n - 1:
                k = 0
                continue
            j = self.sa[position + 1]
            while i + k < n and j + k < n and s[i + k] == s[j + k]:
                k += 1
            lcp[position] = k
            if k:
                k -= 1
        return lcp