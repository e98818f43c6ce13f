import pytest

from cpkit.eertree import PalindromicTree, count_palindromic_substrings


def _substrings(text):
    return [text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)]


def test_small_example():
    assert count_palindromic_substrings("abba") == 6


@pytest.mark.parametrize("text", ["abacaba", "aaaa", "abcd", "abaaba", "zzyzzyz", ""])
def test_count_matches_brute_force(text):
    expected = sum(s == s[::-1] for s in _substrings(text))
    assert count_palindromic_substrings(text) == expected


@pytest.mark.parametrize("text", ["abacaba", "aaaa", "banana", "abcba"])
def test_new_nodes_are_distinct_palindromes(text):
    tree = PalindromicTree()
    created = sum(tree.add(ch) for ch in text)
    assert created == len({s for s in _substrings(text) if s == s[::-1]})


@pytest.mark.parametrize("text", ["abacaba", "xyxxyx"])
def test_suffix_counts_per_prefix(text):
    tree = PalindromicTree()
    for end, ch in enumerate(text, start=1):
        tree.add(ch)
        prefix = text[:end]
        expected = sum(prefix[i:] == prefix[i:][::-1] for i in range(end))
        assert tree.suffix_palindrome_count() == expected


def test_empty_tree_has_no_suffix_palindromes():
    assert PalindromicTree().suffix_palindrome_count() == 0


def test_add_rejects_multiple_characters():
    with pytest.raises(ValueError):
        PalindromicTree().add("ab")