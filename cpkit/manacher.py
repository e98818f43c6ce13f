"""Manacher's algorithm: palindrome radii around every centre."""

from __future__ import annotations


class Manacher:
    """Palindrome radii of a string.

    ``odd[i]`` is half (rounded down) the longest odd palindrome centred at
    ``i``; ``even[i]`` is half the longest even palindrome whose right centre
    is ``i``.
    """

    def __init__(self, s: str) -> None:
        self.s = s
        n = len(s)
        self.even = [0] * (n + 1)
        self.odd = [0] * n
        for radii, shift in ((self.even, 1), (self.odd, 0)):
            left = right = 0
            for i in range(n):
                t = right - i + shift
                if i < right:
                    radii[i] = min(t, radii[left + t])
                lo = i - radii[i]
                hi = i + radii[i] - shift
                while lo >= 1 and hi + 1 < n and s[lo - 1] == s[hi + 1]:
                    radii[i] += 1
                    lo -= 1
                    hi += 1
                if hi > right:
                    left, right = lo, hi

    def is_palindrome(self, left: int, right: int) -> bool:
        """Whether ``s[left:right + 1]`` is a palindrome (0-indexed, inclusive)."""
        if not 0 <= left <= right < len(self.s):
            raise IndexError(f"invalid range ({left}, {right})")
        length = right - left + 1
        mid = (left + right + 1) // 2
        radii = self.odd if length % 2 else self.even
        return 2 * radii[mid] + length % 2 >= length

    def palindrome_lengths(self) -> list[int]:
        """Longest palindrome length at each of the ``2n - 1`` centres, left to right."""
        lengths: list[int] = []
        n = len(self.s)
        for i, radius in enumerate(self.odd):
            lengths.append(2 * radius + 1)
            if i + 1 < n:
                lengths.append(2 * self.even[i + 1])
        return lengths