"""Integer mixing for hash tables and double polynomial string hashing."""

from __future__ import annotations

import time

_MASK64 = (1 << 64) - 1

MOD1 = 127657753
MOD2 = 987654319
BASE1 = 137
BASE2 = 277


def splitmix64(x: int) -> int:
    """The splitmix64 finaliser on a 64-bit unsigned integer."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)


class SeededHasher:
    """Hash function for integer keys, salted with a per-instance seed."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = time.monotonic_ns() if seed is None else seed

    def __call__(self, x: int) -> int:
        return splitmix64((x + self.seed) & _MASK64)


def power(base: int, exponent: int, mod: int) -> int:
    """``base ** exponent % mod`` for a non-negative exponent."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base % mod, exponent, mod)


def _powers(base: int, mod: int, count: int) -> list[int]:
    out = [1]
    for _ in range(count - 1):
        out.append(out[-1] * base % mod)
    return out


class DoubleHash:
    """Prefix hashes of a string under two moduli; positions are 1-indexed."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.n = len(text)
        pw1 = _powers(BASE1, MOD1, self.n + 1)
        pw2 = _powers(BASE2, MOD2, self.n + 1)
        self._inv1 = _powers(power(BASE1, MOD1 - 2, MOD1), MOD1, self.n + 1)
        self._inv2 = _powers(power(BASE2, MOD2 - 2, MOD2), MOD2, self.n + 1)
        self._h1 = [0]
        self._h2 = [0]
        for ch, p1, p2 in zip(text, pw1, pw2):
            code = ord(ch)
            self._h1.append((self._h1[-1] + p1 * code) % MOD1)
            self._h2.append((self._h2[-1] + p2 * code) % MOD2)

    def get_hash(self, left: int, right: int) -> tuple[int, int]:
        """Hash of ``text[left-1:right]``."""
        if not 1 <= left <= right <= self.n:
            raise ValueError(f"invalid range ({left}, {right}) for length {self.n}")
        first = (self._h1[right] - self._h1[left - 1]) % MOD1 * self._inv1[left - 1] % MOD1
        second = (self._h2[right] - self._h2[left - 1]) % MOD2 * self._inv2[left - 1] % MOD2
        return first, second

    def full_hash(self) -> tuple[int, int]:
        return self.get_hash(1, self.n)