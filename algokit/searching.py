"""Searching in sequences, matrices and answer spaces."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import takewhile


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value."""
    if not nums:
        raise ValueError("nums must not be empty")
    return min(nums)


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of the first largest value; 0 for an empty sequence."""
    if not nums:
        return 0
    return max(range(len(nums)), key=nums.__getitem__)


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of the first ``target``, or -1."""
    return next((i for i, value in enumerate(nums) if value == target), -1)


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of the first run of ``target``."""
    first = search(nums, target)
    if first == -1:
        return [-1, -1]
    run = sum(1 for _ in takewhile(lambda value: value == target, nums[first:]))
    return [first, first + run - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the first index holding a value at least ``target``."""
    return next((i for i, value in enumerate(nums) if value >= target), len(nums))


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n by bisection.

    ``guess(num)`` returns -1 when ``num`` is too high, 1 when too low, and
    0 when it is the pick.
    """
    begin, end = 1, n
    while begin <= end:
        middle = begin + (end - begin) // 2
        attempt = guess(middle)
        if attempt > 0:
            begin = middle + 1
        elif attempt < 0:
            end = middle - 1
        else:
            return middle
    raise ValueError("guess is not consistent with any number in range")


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return whether any row holds ``target``."""
    return any(target in row for row in matrix)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest rate that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    start, end = 1, max(piles)
    answer = end
    while start <= end:
        middle = start + (end - start) // 2
        hours = sum(-(-pile // middle) for pile in piles)
        if hours <= h:
            answer = middle
            end = middle - 1
        else:
            start = middle + 1
    return answer


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of all values of both sequences."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("at least one value is needed")
    half = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[half - 1] + merged[half]) / 2.0
    return float(merged[half])