import pytest

from cpkit.aho_corasick import AhoCorasick, count_occurrences


def _naive(text, pattern):
    return sum(text.startswith(pattern, i) for i in range(len(text) - len(pattern) + 1))


@pytest.mark.parametrize(
    "text, patterns",
    [
        ("ahishers", ["he", "she", "hers", "his"]),
        ("aaaaa", ["a", "aa", "aaa", "b"]),
        ("abababab", ["aba", "bab", "ab", "abababab", "c"]),
        ("xyz", ["xyzw", "yz", "z"]),
    ],
)
def test_counts_match_naive_search(text, patterns):
    assert count_occurrences(text, patterns) == [_naive(text, p) for p in patterns]


def test_duplicate_patterns_counted_separately():
    assert count_occurrences("abcabc", ["abc", "abc"]) == [2, 2]


def test_shared_label_accumulates():
    automaton = AhoCorasick()
    automaton.add("ab", 7)
    automaton.add("b", 7)
    counts = automaton.count_matches("abab")
    assert counts == {7: _naive("abab", "ab") + _naive("abab", "b")}


def test_links_point_to_suffix_nodes():
    automaton = AhoCorasick()
    she = automaton.add("she", 0)
    he = automaton.add("he", 1)
    assert automaton.link(she) == he
    assert automaton.link(0) == 0


def test_go_follows_trie_and_falls_back():
    automaton = AhoCorasick()
    node = automaton.add("ab", 0)
    a_node = automaton.go(0, "a")
    assert automaton.go(a_node, "b") == node
    assert automaton.go(0, "z") == 0
    assert automaton.go(node, "a") == a_node


def test_adding_after_matching_rebuilds():
    automaton = AhoCorasick()
    automaton.add("a", 0)
    assert automaton.count_matches("aba") == {0: 2}
    automaton.add("ba", 1)
    assert automaton.count_matches("aba") == {0: 2, 1: 1}


def test_rejects_characters_outside_alphabet():
    automaton = AhoCorasick()
    with pytest.raises(ValueError):
        automaton.add("Abc", 0)
    automaton.add("abc", 0)
    with pytest.raises(ValueError):
        automaton.count_matches("ab c")


def test_node_out_of_range():
    automaton = AhoCorasick()
    with pytest.raises(IndexError):
        automaton.link(5)