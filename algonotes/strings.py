"""String problems: substrings, prefixes, palindromes and rearrangements."""

from __future__ import annotations

from collections import Counter
from itertools import cycle, groupby
from typing import Iterable, Sequence

VOWELS = frozenset("aeiouAEIOU")


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string; empty input gives ''."""
    if not strs:
        return ""
    prefix: list[str] = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def longest_palindrome(s: str) -> str:
    """The longest palindromic substring; the leftmost one wins a tie."""
    n = len(s)
    best_start, best_len = 0, 0
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < n and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        length = hi - lo - 1
        if length > best_len:
            best_start, best_len = lo + 1, length
    return s[best_start : best_start + best_len]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows <= 1 or len(s) <= num_rows:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    order = list(range(num_rows)) + list(range(num_rows - 2, 0, -1))
    for ch, row in zip(s, cycle(order)):
        rows[row].append(ch)
    return "".join("".join(row) for row in rows)


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle``, or -1; an empty needle gives 0."""
    if not needle:
        return 0
    failure = [0] * len(needle)
    k = 0
    for i, ch in enumerate(needle[1:], start=1):
        while k and ch != needle[k]:
            k = failure[k - 1]
        if ch == needle[k]:
            k += 1
        failure[i] = k
    k = 0
    for i, ch in enumerate(haystack):
        while k and ch != needle[k]:
            k = failure[k - 1]
        if ch == needle[k]:
            k += 1
        if k == len(needle):
            return i - len(needle) + 1
    return -1


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Start indices of substrings made of every word exactly once, in any order."""
    if not words:
        return []
    width = len(words[0])
    if any(len(word) != width for word in words):
        raise ValueError("all words must have the same length")
    need = Counter(words)
    total = width * len(words)
    found: list[int] = []
    for i in range(len(s) - total + 1):
        chunks = Counter(s[i + j * width : i + (j + 1) * width] for j in range(len(words)))
        if chunks == need:
            found.append(i)
    return found


def _say(term: str) -> str:
    return "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))


def count_and_say(n: int) -> str:
    """The n-th term of the count-and-say sequence, starting from '1'."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    term = "1"
    for _ in range(n - 1):
        term = _say(term)
    return term


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t``; '' if none."""
    if not s or not t:
        return ""
    need = Counter(t)
    missing = len(t)
    left = 0
    best_start, best_len = 0, len(s) + 1
    for right, ch in enumerate(s, start=1):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            if right - left < best_len:
                best_start, best_len = left, right - left
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    return "" if best_len > len(s) else s[best_start : best_start + best_len]


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def reverse_string(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    positions = [i for i, ch in enumerate(s) if ch in VOWELS]
    chars = list(s)
    for i, j in zip(positions, reversed(positions)):
        chars[i] = s[j]
    return "".join(chars)