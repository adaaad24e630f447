import io
from collections import Counter

import pytest

from algokit.hashing import (
    can_construct,
    find_anagrams,
    group_anagrams,
    intersect,
    intersection,
    is_anagram,
    is_happy,
    main,
)


@pytest.mark.parametrize("n, expected", [(1, True), (7, True), (19, True), (2, False), (4, False), (0, False)])
def test_is_happy(n, expected):
    assert is_happy(n) is expected


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("ab", "abc", False),
        ("", "", True),
        ("aab", "abb", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_is_anagram_is_symmetric():
    pairs = [("listen", "silent"), ("abc", "abd"), ("aabb", "bbaa")]
    for s, t in pairs:
        assert is_anagram(s, t) == is_anagram(t, s)


def test_intersection_unique_values():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]


def test_intersection_order_follows_second():
    result = intersection([4, 9, 5], [9, 4, 9, 8, 4])
    assert result == [9, 4]


def test_intersection_invariants():
    a, b = [3, 1, 7, 7, 2], [7, 5, 3, 3, 9, 1]
    result = intersection(a, b)
    assert len(result) == len(set(result))
    assert set(result) == set(a) & set(b)


def test_intersect_keeps_multiplicity():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]
    assert intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [9, 4]


def test_intersect_matches_counter_min():
    a, b = [1, 1, 1, 2, 3, 3], [3, 1, 3, 3, 1, 4]
    result = intersect(a, b)
    assert Counter(result) == Counter(a) & Counter(b)


def test_intersect_empty():
    assert intersect([], [1, 2]) == []


@pytest.mark.parametrize(
    "note, magazine, expected",
    [("a", "b", False), ("aa", "ab", False), ("aa", "aab", True), ("", "x", True)],
)
def test_can_construct(note, magazine, expected):
    assert can_construct(note, magazine) is expected


def test_find_anagrams_examples():
    assert find_anagrams("cbaebabacd", "abc") == [0, 6]
    assert find_anagrams("abab", "ab") == [0, 1, 2]


def test_find_anagrams_short_text():
    assert find_anagrams("ab", "abc") == []


def test_find_anagrams_indices_are_anagrams():
    s, p = "bacdgabcdacb", "abc"
    starts = find_anagrams(s, p)
    assert starts
    for start in starts:
        assert is_anagram(s[start:start + len(p)], p)
    others = set(range(len(s) - len(p) + 1)) - set(starts)
    for start in others:
        assert not is_anagram(s[start:start + len(p)], p)


def test_group_anagrams_example():
    groups = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    assert groups == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


def test_group_anagrams_partition():
    words = ["abc", "bca", "xy", "yx", "z", "cab", ""]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    for group in groups:
        assert all(is_anagram(group[0], w) for w in group)
    firsts = [g[0] for g in groups]
    for i, a in enumerate(firsts):
        for b in firsts[i + 1:]:
            assert not is_anagram(a, b)


def test_main_with_arguments(capsys):
    assert main(["anagram", "nagaram"]) == 0
    assert capsys.readouterr().out == "1"
    main(["rat", "car"])
    assert capsys.readouterr().out == "0"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("listen\nsilent\n"))
    assert main() == 0
    assert capsys.readouterr().out == "1"