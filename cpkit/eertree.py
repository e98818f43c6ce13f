"""Palindromic tree (eertree) built one character at a time."""

from __future__ import annotations

from dataclasses import dataclass, field

_IMAGINARY = 0
_EMPTY = 1


@dataclass(slots=True)
class _Node:
    length: int
    link: int
    depth: int = 0
    children: dict[str, int] = field(default_factory=dict)


class PalindromicTree:
    """Every distinct palindrome of the text seen so far is one node.

    Node 0 is the root of length -1 and node 1 the empty palindrome.
    """

    def __init__(self) -> None:
        self._nodes = [_Node(-1, _IMAGINARY), _Node(0, _IMAGINARY)]
        self._text: list[str] = []
        self._suffix = _EMPTY

    def _extendable(self, v: int, pos: int, ch: str) -> bool:
        before = pos - 1 - self._nodes[v].length
        return before >= 0 and self._text[before] == ch

    def add(self, ch: str) -> bool:
        """Append ``ch``; return True if it creates a new distinct palindrome."""
        if len(ch) != 1:
            raise ValueError("add takes a single character")
        pos = len(self._text)
        self._text.append(ch)
        cur = self._suffix
        while not self._extendable(cur, pos, ch):
            cur = self._nodes[cur].link
        existing = self._nodes[cur].children.get(ch)
        if existing is not None:
            self._suffix = existing
            return False

        new = len(self._nodes)
        length = self._nodes[cur].length + 2
        self._nodes[cur].children[ch] = new
        if length == 1:
            self._nodes.append(_Node(length, _EMPTY, 1))
        else:
            cur = self._nodes[cur].link
            while not self._extendable(cur, pos, ch):
                cur = self._nodes[cur].link
            link = self._nodes[cur].children[ch]
            self._nodes.append(_Node(length, link, 1 + self._nodes[link].depth))
        self._suffix = new
        return True

    def suffix_palindrome_count(self) -> int:
        """Number of non-empty palindromic suffixes of the text so far."""
        return self._nodes[self._suffix].depth


def count_palindromic_substrings(text: str) -> int:
    """Number of palindromic substrings of ``text``, counted by position."""
    tree = PalindromicTree()
    total = 0
    for ch in text:
        tree.add(ch)
        total += tree.suffix_palindrome_count()
    return total