"""Aho-Corasick automaton over lowercase Latin letters."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

ALPHABET_SIZE = 26


def _code(ch: str) -> int:
    code = ord(ch) - ord("a")
    if not 0 <= code < ALPHABET_SIZE:
        raise ValueError(f"character {ch!r} is not a lowercase Latin letter")
    return code


@dataclass(slots=True)
class _Node:
    parent: int
    char: str
    children: list[int] = field(default_factory=lambda: [-1] * ALPHABET_SIZE)
    indices: list[int] = field(default_factory=list)


class AhoCorasick:
    """Trie of patterns with suffix links, for counting occurrences in a text."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = [_Node(-1, "$")]
        self._links: list[int] = []
        self._goto: list[list[int]] = []
        self._order: list[int] = []
        self._dirty = True

    def add(self, pattern: str, index: int) -> int:
        """Insert ``pattern`` labelled ``index``; return its trie node."""
        codes = [_code(ch) for ch in pattern]
        v = 0
        for ch, code in zip(pattern, codes):
            child = self._nodes[v].children[code]
            if child < 0:
                child = len(self._nodes)
                self._nodes[v].children[code] = child
                self._nodes.append(_Node(v, ch))
            v = child
        self._nodes[v].indices.append(index)
        self._dirty = True
        return v

    def _build(self) -> None:
        if not self._dirty:
            return
        size = len(self._nodes)
        links = [0] * size
        goto = [[0] * ALPHABET_SIZE for _ in range(size)]
        order: list[int] = []
        queue = deque([0])
        while queue:
            v = queue.popleft()
            order.append(v)
            for code, child in enumerate(self._nodes[v].children):
                if child >= 0:
                    links[child] = 0 if v == 0 else goto[links[v]][code]
                    goto[v][code] = child
                    queue.append(child)
                else:
                    goto[v][code] = 0 if v == 0 else goto[links[v]][code]
        self._links, self._goto, self._order = links, goto, order
        self._dirty = False

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._nodes):
            raise IndexError(f"node {v} out of range")

    def link(self, v: int) -> int:
        """Suffix link of node ``v``: its longest proper suffix in the trie."""
        self._check(v)
        self._build()
        return self._links[v]

    def go(self, v: int, ch: str) -> int:
        """State reached from node ``v`` on character ``ch``."""
        self._check(v)
        code = _code(ch)
        self._build()
        return self._goto[v][code]

    def count_matches(self, text: str) -> dict[int, int]:
        """Occurrences in ``text`` of the patterns, keyed by their labels."""
        codes = [_code(ch) for ch in text]
        self._build()
        counts = [0] * len(self._nodes)
        state = 0
        for code in codes:
            state = self._goto[state][code]
            counts[state] += 1
        for v in reversed(self._order[1:]):
            counts[self._links[v]] += counts[v]
        result: dict[int, int] = {}
        for node, count in zip(self._nodes, counts):
            for index in node.indices:
                result[index] = result.get(index, 0) + count
        return result


def count_occurrences(text: str, patterns: Sequence[str]) -> list[int]:
    """Number of (possibly overlapping) occurrences of each pattern in ``text``."""
    automaton = AhoCorasick()
    for index, pattern in enumerate(patterns):
        automaton.add(pattern, index)
    counts = automaton.count_matches(text)
    return [counts[index] for index in range(len(patterns))]