"""Reordering, filtering and combining sequences of integers."""

from __future__ import annotations

from collections import Counter
from heapq import merge
from itertools import groupby
from typing import Iterable, Iterator, Sequence


def _advance(nums: list[int]) -> bool:
    """Step to the next permutation; on wrap-around sort and return False."""
    i = len(nums) - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i < 0:
        nums.reverse()
        return False
    j = len(nums) - 1
    while nums[j] <= nums[i]:
        j -= 1
    nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1 :] = reversed(nums[i + 1 :])
    return True


def next_permutation(nums: list[int]) -> None:
    """Rearrange in place into the next greater permutation, wrapping to sorted."""
    if len(nums) >= 2:
        _advance(nums)


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in place and return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of ``val`` in place and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def _combinations(
    pool: Sequence[int], target: int, reuse: bool, skip_equal: bool
) -> Iterator[list[int]]:
    chosen: list[int] = []

    def search(remaining: int, first: int) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for i in range(first, len(pool)):
            value = pool[i]
            if value > remaining:
                break
            if skip_equal and i > first and value == pool[i - 1]:
                continue
            chosen.append(value)
            yield from search(remaining - value, i if reuse else i + 1)
            chosen.pop()

    return search(target, 0)


def _sorted_positive(candidates: Iterable[int]) -> list[int]:
    pool = sorted(candidates)
    if pool and pool[0] <= 0:
        raise ValueError("candidates must be positive")
    return pool


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Non-decreasing combinations of candidates, each reusable, summing to target."""
    pool = _sorted_positive(candidates)
    return list(_combinations(pool, target, reuse=True, skip_equal=False))


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct combinations using each candidate at most once, summing to target."""
    pool = _sorted_positive(candidates)
    return list(_combinations(pool, target, reuse=False, skip_equal=True))


def permute(nums: Iterable[int]) -> list[list[int]]:
    """All distinct permutations in lexicographic order."""
    current = sorted(nums)
    if len(current) < 2:
        return [current]
    result = [list(current)]
    while _advance(current):
        result.append(list(current))
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset; subset j holds the items whose index bit is set in j."""
    items = list(nums)
    return [
        [value for i, value in enumerate(items) if mask >> i & 1]
        for mask in range(1 << len(items))
    ]


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching intervals, ordered by start."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place."""
    counts = Counter(nums)
    unknown = set(counts) - {0, 1, 2}
    if unknown:
        raise ValueError(f"colours must be 0, 1 or 2, got {sorted(unknown)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of nums2 into the first ``m`` of nums1, in place."""
    if m < 0 or n < 0 or m > len(nums1) or n > len(nums2):
        raise ValueError("counts out of range")
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    non_zero = [value for value in nums if value]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Sorted distinct values found in both inputs."""
    return sorted(set(nums1) & set(nums2))


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Sorted common values, each as often as it appears in both inputs."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())