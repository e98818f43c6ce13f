"""Linear basis over GF(2) for xor queries on a multiset of integers."""

from __future__ import annotations

DEFAULT_MODULUS = 1_000_000_007


class XorBasis:
    """Reduced xor basis, kept sorted in decreasing order."""

    def __init__(self, modulus: int = DEFAULT_MODULUS) -> None:
        self.modulus = modulus
        self.basis: list[int] = []
        self.count = 0
        self._xor_total = 0

    def add(self, x: int) -> None:
        """Insert ``x`` into the multiset."""
        self.count += 1
        self._xor_total ^= x
        for b in self.basis:
            x = min(x, x ^ b)
        if not x:
            return
        self.basis = [b ^ x if (b ^ x) < b else b for b in self.basis]
        self.basis.append(x)
        self.basis.sort(reverse=True)

    def rank(self) -> int:
        """Number of basis vectors."""
        return len(self.basis)

    def clear(self) -> None:
        self.count = 0
        self._xor_total = 0
        self.basis.clear()

    def possible(self, x: int) -> bool:
        """Whether some subset xors to ``x``."""
        return self.min_xor(x) == 0

    def max_xor(self, x: int = 0) -> int:
        for b in self.basis:
            x = max(x, x ^ b)
        return x

    def min_xor(self, x: int = 0) -> int:
        for b in self.basis:
            x = min(x, x ^ b)
        return x

    def count_subsets(self, x: int) -> int:
        """Number of subsets xoring to ``x``, modulo the modulus."""
        if not self.possible(x):
            return 0
        return pow(2, self.count - self.rank(), self.modulus)

    def sum_of_all(self) -> int:
        """Xor of all inserted values times ``2 ** (count - 1)``."""
        if not self.count:
            return 0
        return self._xor_total * (1 << (self.count - 1))

    def kth(self, k: int) -> int:
        """The k-th smallest (1-indexed) value reachable as a subset xor."""
        size = self.rank()
        if not 1 <= k <= 1 << size:
            raise IndexError(f"k={k} is out of range 1..{1 << size}")
        k -= 1
        result = 0
        for shift, b in zip(reversed(range(size)), self.basis):
            if k >> shift & 1:
                result ^= b
        return result