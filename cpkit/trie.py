"""Binary trie over fixed-width non-negative integers for xor queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class _Node:
    children: list = field(default_factory=lambda: [None, None])
    count: int = 0


class BinaryTrie:
    """Multiset of integers stored bit by bit, most significant bit first."""

    def __init__(self, bits: int = 31) -> None:
        if bits < 1:
            raise ValueError("bits must be positive")
        self.bits = bits
        self._root = _Node()

    def __len__(self) -> int:
        return self._root.count

    def _bits_of(self, value: int):
        for i in reversed(range(self.bits)):
            yield value >> i & 1

    def insert(self, value: int) -> None:
        """Add one copy of ``value``."""
        if not 0 <= value < 1 << self.bits:
            raise ValueError(f"value {value} does not fit in {self.bits} bits")
        node = self._root
        node.count += 1
        for bit in self._bits_of(value):
            if node.children[bit] is None:
                node.children[bit] = _Node()
            node = node.children[bit]
            node.count += 1

    def count_less(self, x: int, k: int) -> int:
        """Number of stored values ``v`` with ``v ^ x < k``."""
        node = self._root
        total = 0
        for i in reversed(range(self.bits)):
            if node is None:
                break
            b1 = x >> i & 1
            if k >> i & 1:
                same = node.children[b1]
                if same is not None:
                    total += same.count
                node = node.children[b1 ^ 1]
            else:
                node = node.children[b1]
        return total

    def _require_values(self) -> None:
        if not self._root.count:
            raise ValueError("the trie is empty")

    def max_xor(self, x: int) -> int:
        """Largest ``v ^ x`` over stored values ``v``."""
        self._require_values()
        node = self._root
        result = 0
        for bit in self._bits_of(x):
            wanted = node.children[bit ^ 1]
            if wanted is not None:
                node = wanted
                result = result << 1 | 1
            else:
                node = node.children[bit]
                result <<= 1
        return result

    def min_xor(self, x: int) -> int:
        """Smallest ``v ^ x`` over stored values ``v``."""
        self._require_values()
        node = self._root
        result = 0
        for bit in self._bits_of(x):
            wanted = node.children[bit]
            if wanted is not None:
                node = wanted
                result <<= 1
            else:
                node = node.children[bit ^ 1]
                result = result << 1 | 1
        return result