"""Array algorithms: sums, windows, counting and in-place edits."""

from __future__ import annotations

import heapq
import operator
from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import accumulate


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the given lines."""
    if not height:
        raise ValueError("height must not be empty")
    start, end = 0, len(height) - 1
    best = (end - start) * min(height[start], height[end])
    while start < end:
        if height[start] < height[end]:
            start += 1
        else:
            end -= 1
        best = max(best, (end - start) * min(height[start], height[end]))
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sale."""
    lowest = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    ordered = sorted(set(nums))
    if not ordered:
        return 0
    best = current = 1
    for previous, value in zip(ordered, ordered[1:]):
        if value == previous + 1:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def _first_unique(nums: Sequence[int]) -> int:
    counts = Counter(nums)
    return next((value for value, count in counts.items() if count == 1), -1)


def single_number(nums: Sequence[int]) -> int:
    """Return the value seen exactly once (others twice), or -1."""
    return _first_unique(nums)


def single_number_ii(nums: Sequence[int]) -> int:
    """Return the value seen exactly once (others three times), or -1."""
    return _first_unique(nums)


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triplet summing to zero, in sorted order."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered):
        if first > 0:
            continue
        if i > 0 and first == ordered[i - 1]:
            continue
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                found.add((first, ordered[left], ordered[right]))
                left += 1
                right -= 1
    return [list(triplet) for triplet in sorted(found)]


def _pair_indices(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based indices of two values adding to ``target``, or []."""
    pair = _pair_indices(numbers, target)
    return [] if pair is None else [pair[0] + 1, pair[1] + 1]


def majority_element(nums: Sequence[int]) -> int:
    """Return the value at the middle of the values sorted high to low."""
    if not nums:
        raise ValueError("nums must not be empty")
    return sorted(nums, reverse=True)[len(nums) // 2]


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    if k == 0 or not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the 0-based indices of two values adding to ``target``, or []."""
    pair = _pair_indices(nums, target)
    return [] if pair is None else list(pair)


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return whether equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other values."""
    prefix = list(accumulate(nums, operator.mul, initial=1))[:-1]
    suffix = list(accumulate(reversed(nums), operator.mul, initial=1))[:-1]
    return [before * after for before, after in zip(prefix, reversed(suffix))]


def apply_operations(nums: list[int]) -> list[int]:
    """Double equal neighbours, zero the second, then shift zeros to the end.

    ``nums`` is changed in place and returned.
    """
    for i in range(len(nums) - 1):
        if nums[i] == nums[i + 1]:
            nums[i] *= 2
            nums[i + 1] = 0
    kept = [num for num in nums if num != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))
    return nums


def remove_duplicates(nums: list[int]) -> int:
    """Replace ``nums`` with its distinct values sorted; return their count."""
    nums[:] = sorted(set(nums))
    return len(nums)


def buy_choco(prices: Sequence[int], money: int) -> int:
    """Return the money left after buying the two cheapest items, if affordable."""
    if len(prices) < 2:
        raise ValueError("at least two prices are needed")
    cost = sum(heapq.nsmallest(2, prices))
    return money if cost > money else money - cost


def find_non_min_or_max(nums: Sequence[int]) -> int:
    """Return the first value that is neither the minimum nor the maximum, or -1."""
    if not nums:
        return -1
    lowest, highest = min(nums), max(nums)
    return next((num for num in nums if lowest < num < highest), -1)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [num for num in nums if num != val]
    return len(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the other values' order."""
    kept = [num for num in nums if num != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def trap(height: Sequence[int]) -> int:
    """Return the units of rain water held between the bars."""
    if not height:
        raise ValueError("height must not be empty")
    left, right = 0, len(height) - 1
    left_max, right_max = height[left], height[right]
    water = 0
    while left < right:
        if height[left] < height[right]:
            left += 1
            left_max = max(left_max, height[left])
            water += left_max - height[left]
        else:
            right -= 1
            right_max = max(right_max, height[right])
            water += right_max - height[right]
    return water


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous slice."""
    if not nums:
        raise ValueError("nums must not be empty")
    running = 0
    best = nums[0]
    for num in nums:
        running = max(running, 0) + num
        best = max(best, running)
    return best


def pivot_index(nums: Sequence[int]) -> int:
    """Return the first index whose left and right sums match, or -1."""
    total = sum(nums)
    left_sum = 0
    for index, num in enumerate(nums):
        if left_sum == total - left_sum - num:
            return index
        left_sum += num
    return -1


def remove_duplicates_at_most_twice(nums: list[int]) -> int:
    """Keep at most two copies of each value in place; return the new length."""
    counts: Counter[int] = Counter()
    kept = []
    for num in nums:
        counts[num] += 1
        if counts[num] <= 2:
            kept.append(num)
    nums[:] = kept
    return len(nums)


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Drop the ``n`` trailing slots of ``nums1``, add ``nums2`` and sort in place."""
    if n > 0:
        del nums1[-n:]
    nums1.extend(nums2)
    nums1.sort()


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, smaller values first on ties."""
    counts = Counter(nums)
    if k > len(counts):
        raise ValueError("k exceeds the number of distinct values")
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [value for value, _ in ranked[:k]]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return whether no row, column or 3x3 box repeats a filled cell."""
    rows: defaultdict[int, set[str]] = defaultdict(set)
    columns: defaultdict[int, set[str]] = defaultdict(set)
    boxes: defaultdict[tuple[int, int], set[str]] = defaultdict(set)
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == ".":
                continue
            box = (r // 3, c // 3)
            if cell in rows[r] or cell in columns[c] or cell in boxes[box]:
                return False
            rows[r].add(cell)
            columns[c].add(cell)
            boxes[box].add(cell)
    return True