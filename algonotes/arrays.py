"""Array problems: k-sums, searching, water, subarrays and counting."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from heapq import merge
from itertools import count
from typing import Iterable, Iterator, Sequence


def _pair_sums(nums: Sequence[int], lo: int, hi: int, target: int) -> Iterator[tuple[int, int]]:
    """Distinct value pairs from the sorted slice nums[lo..hi] that add up to target."""
    while lo < hi:
        total = nums[lo] + nums[hi]
        if total == target:
            yield nums[lo], nums[hi]
            while lo < hi and nums[lo] == nums[lo + 1]:
                lo += 1
            while lo < hi and nums[hi] == nums[hi - 1]:
                hi -= 1
            lo += 1
            hi -= 1
        elif total < target:
            lo += 1
        else:
            hi -= 1


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Distinct non-decreasing triplets that sum to zero, ordered by first value."""
    values = sorted(nums)
    found: list[list[int]] = []
    last = len(values) - 1
    for i in range(len(values) - 2):
        first = values[i]
        if i > 0 and first == values[i - 1]:
            continue
        found.extend([first, a, b] for a, b in _pair_sums(values, i + 1, last, -first))
    return found


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """The sum of three values closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("need at least three numbers")
    best = nums[0] + nums[1] + nums[2]
    values = sorted(nums)
    size = len(values)
    for i in range(size - 2):
        lo, hi = i + 1, size - 1
        while lo < hi:
            total = values[i] + values[lo] + values[hi]
            if abs(total - target) < abs(best - target):
                if total == target:
                    return total
                best = total
            if total > target:
                hi -= 1
            else:
                lo += 1
    return best


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the vertical lines."""
    best = 0
    lo, hi = 0, len(height) - 1
    while lo < hi:
        best = max(best, min(height[lo], height[hi]) * (hi - lo))
        if height[lo] < height[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Median of the union of two sorted sequences."""
    merged = list(merge(nums1, nums2))
    if not merged:
        raise ValueError("both sequences are empty")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2.0


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Indices of the first pair of values adding up to ``target``."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, i]
        seen[value] = i
    raise ValueError(f"no two values add up to {target}")


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Distinct non-decreasing quadruplets that sum to ``target``."""
    values = sorted(nums)
    size = len(values)
    found: list[list[int]] = []
    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            rest = target - values[i] - values[j]
            found.extend(
                [values[i], values[j], a, b]
                for a, b in _pair_sums(values, j + 1, size - 1, rest)
            )
    return found


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or [-1, -1]."""
    start = bisect_left(nums, target)
    if start == len(nums) or nums[start] != target:
        return [-1, -1]
    return [start, bisect_right(nums, target) - 1]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted list of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index where ``target`` is, or would be inserted to keep ``nums`` sorted."""
    return bisect_left(nums, target)


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars."""
    if len(height) < 3:
        return 0
    lo, hi = 0, len(height) - 1
    level = water = 0
    while lo <= hi:
        if height[lo] < height[hi]:
            low = height[lo]
            lo += 1
        else:
            low = height[hi]
            hi -= 1
        level = max(level, low)
        water += level - low
    return water


def max_sub_array(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    items = iter(nums)
    try:
        best = running = next(items)
    except StopIteration:
        raise ValueError("sequence is empty") from None
    for value in items:
        running = max(value, running + value)
        best = max(best, running)
    return best


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Area of the largest rectangle under the histogram."""
    bars = [*heights, 0]
    stack: list[int] = []
    largest = 0
    for i, h in enumerate(bars):
        while stack and bars[stack[-1]] > h:
            top = bars[stack.pop()]
            left = stack[-1] if stack else -1
            largest = max(largest, top * (i - left - 1))
        stack.append(i)
    return largest


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if none is possible."""
    lowest = float("inf")
    best = 0
    for price in prices:
        best = max(best, int(price - lowest)) if lowest != float("inf") else best
        lowest = min(lowest, price)
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached, each value being a maximum jump."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
        if reach >= len(nums) - 1:
            return True
    return True


def first_missing_positive(nums: Iterable[int]) -> int:
    """Smallest positive integer not present."""
    present = set(nums)
    return next(k for k in count(1) if k not in present)


def missing_number(nums: Sequence[int]) -> int:
    """The one value of 0..len(nums) that is absent."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def majority_element(nums: Iterable[int]) -> int:
    """The value at the middle of the sorted input: the majority when one exists."""
    values = sorted(nums)
    if not values:
        raise ValueError("sequence is empty")
    return values[len(values) // 2]


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False