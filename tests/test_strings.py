from collections import Counter

import pytest

from algonotes.strings import (
    count_and_say,
    find_substring,
    group_anagrams,
    is_anagram,
    length_of_longest_substring,
    longest_common_prefix,
    longest_palindrome,
    min_window,
    reverse_string,
    reverse_vowels,
    str_str,
    zigzag_convert,
)


def _distinct(sub):
    return len(set(sub)) == len(sub)


@pytest.mark.parametrize(
    "s,expected",
    [("abcabcbb", 3), ("bbbbb", 1), ("pwwkew", 3), ("dvdf", 3), ("a", 1), ("abba", 2)],
)
def test_longest_substring_is_tight(s, expected):
    r = length_of_longest_substring(s)
    assert r == expected
    windows = [s[i : i + r] for i in range(len(s) - r + 1)]
    assert any(_distinct(w) for w in windows)
    longer = [s[i : i + r + 1] for i in range(len(s) - r)]
    assert not any(_distinct(w) for w in longer)


def test_longest_substring_empty():
    assert length_of_longest_substring("") == 0


def test_common_prefix_is_member():
    strs = ["flow", "flower", "flowing"]
    assert longest_common_prefix(strs) == strs[0]


def test_common_prefix_edges():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["alone"]) == "alone"
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_common_prefix_is_maximal():
    strs = ["flower", "flow", "flight"]
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    assert len({s[len(prefix) : len(prefix) + 1] for s in strs}) > 1


@pytest.mark.parametrize("s", ["babad", "cbbd", "racecar", "abacdfgdcaba", "ab", "a"])
def test_longest_palindrome_properties(s):
    p = longest_palindrome(s)
    assert p == p[::-1]
    assert p in s
    n = len(s)
    assert not any(
        s[i:j] == s[i:j][::-1]
        for i in range(n)
        for j in range(i + len(p) + 1, n + 1)
    )


def test_longest_palindrome_whole_and_first():
    assert longest_palindrome("racecar") == "racecar"
    assert longest_palindrome("ab") == "ab"[0]
    assert longest_palindrome("") == ""


def test_zigzag_known():
    assert zigzag_convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@pytest.mark.parametrize("rows", [2, 3, 4, 5])
def test_zigzag_permutes(rows):
    s = "PAYPALISHIRING"
    out = zigzag_convert(s, rows)
    assert sorted(out) == sorted(s)
    assert out[0] == s[0]


def test_zigzag_unchanged_cases():
    assert zigzag_convert("ABCDE", 1) == "ABCDE"
    assert zigzag_convert("ABC", 5) == "ABC"


@pytest.mark.parametrize(
    "haystack,needle",
    [("hello", "ll"), ("aaaaa", "bba"), ("mississippi", "issip"), ("abc", "abc"), ("aabaaab", "aaab")],
)
def test_str_str_agrees_with_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


def test_str_str_edges():
    assert str_str("abc", "") == 0
    assert str_str("", "a") == -1


def test_find_substring_known():
    assert find_substring("barfoothefoobarman", ["foo", "bar"]) == [0, 9]


def test_find_substring_indices_are_valid():
    s = "wordgoodgoodgoodbestword"
    words = ["word", "good", "best", "good"]
    found = find_substring(s, words)
    assert found
    for i in found:
        chunks = [s[i + 4 * k : i + 4 * (k + 1)] for k in range(len(words))]
        assert sorted(chunks) == sorted(words)


def test_find_substring_errors_and_empty():
    assert find_substring("abc", []) == []
    with pytest.raises(ValueError):
        find_substring("abc", ["a", "bc"])


def test_count_and_say_first():
    assert count_and_say(1) == "1"


@pytest.mark.parametrize("n", range(1, 8))
def test_count_and_say_decodes_to_previous(n):
    nxt = count_and_say(n + 1)
    decoded = "".join(int(nxt[k]) * nxt[k + 1] for k in range(0, len(nxt), 2))
    assert decoded == count_and_say(n)


def test_count_and_say_rejects_zero():
    with pytest.raises(ValueError):
        count_and_say(0)


def test_group_anagrams_properties():
    strs = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(strs)
    assert Counter(w for g in groups for w in g) == Counter(strs)
    keys = [{"".join(sorted(w)) for w in g} for g in groups]
    assert all(len(k) == 1 for k in keys)
    assert len({next(iter(k)) for k in keys}) == len(groups)
    assert [g[0] for g in groups] == ["eat", "tan", "bat"]


def test_min_window_known():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


def test_min_window_properties():
    s, t = "aaflslflsldkalskaaa", "aaa"
    w = min_window(s, t)
    assert not Counter(t) - Counter(w)
    assert w == "aaa"


def test_min_window_none():
    assert min_window("a", "aa") == ""
    assert min_window("abc", "") == ""


def test_is_anagram():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")
    assert not is_anagram("abc", "abcx")


def test_reverse_string_round_trip():
    s = "hello world"
    r = reverse_string(s)
    assert reverse_string(r) == s
    assert r[0] == s[-1]


@pytest.mark.parametrize("s", ["hello", "leetcode", "aA", "xyz", ""])
def test_reverse_vowels_properties(s):
    r = reverse_vowels(s)
    assert reverse_vowels(r) == s
    assert [c for c in r if c not in "aeiouAEIOU"] == [c for c in s if c not in "aeiouAEIOU"]
    assert [c for c in r if c in "aeiouAEIOU"] == [c for c in s if c in "aeiouAEIOU"][::-1]