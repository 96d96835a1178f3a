"""Pattern matching, bracket problems and digit decoding."""

from __future__ import annotations

from functools import lru_cache
from itertools import pairwise, product
from typing import Iterator

PHONE_LETTERS = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_DIGITS = frozenset("0123456789")


def regex_match(s: str, p: str) -> bool:
    """Whether ``p`` matches all of ``s``; '.' is any character, 'x*' any run of x."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def wildcard_match(s: str, p: str) -> bool:
    """Whether ``p`` matches all of ``s``; '?' is one character, '*' any run."""
    i = j = 0
    star = -1
    mark = 0
    while i < len(s):
        if j < len(p) and p[j] in (s[i], "?"):
            i += 1
            j += 1
        elif j < len(p) and p[j] == "*":
            star, mark = j, i
            j += 1
        elif star >= 0:
            mark += 1
            i, j = mark, star + 1
        else:
            return False
    while j < len(p) and p[j] == "*":
        j += 1
    return j == len(p)


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by its partner in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return not stack


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed run of '(' and ')'."""
    stack = [-1]
    best = 0
    for i, ch in enumerate(s):
        if ch == "(":
            stack.append(i)
        elif ch == ")":
            stack.pop()
            if stack:
                best = max(best, i - stack[-1])
            else:
                stack.append(i)
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return best


def generate_parentheses(n: int) -> list[str]:
    """Every well-formed string of ``n`` bracket pairs, '(' branches first."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")

    def build(opens: int, closes: int, prefix: str) -> Iterator[str]:
        if not opens and not closes:
            yield prefix
            return
        if opens:
            yield from build(opens - 1, closes, prefix + "(")
        if closes > opens:
            yield from build(opens, closes - 1, prefix + ")")

    return list(build(n, n, "")) if n else []


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad could spell for ``digits``."""
    if not digits:
        return []
    try:
        letters = [PHONE_LETTERS[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a digit: {exc.args[0]!r}") from None
    return ["".join(combo) for combo in product(*letters)]


def num_decodings(s: str) -> int:
    """Number of ways to read the digits as letters with 'A'=1 ... 'Z'=26."""
    if any(ch not in _DIGITS for ch in s):
        raise ValueError(f"not a digit string: {s!r}")
    if not s or s[0] == "0":
        return 0
    pre, cur = 1, 1
    for a, b in pairwise(s):
        single = b != "0"
        double = a == "1" or (a == "2" and b in "0123456")
        if not single and not double:
            return 0
        pre, cur = cur, (cur if single else 0) + (pre if double else 0)
    return cur