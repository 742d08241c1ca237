"""Stack, queue and heap based algorithms and containers."""

from __future__ import annotations

import heapq
import operator
from collections import deque
from collections.abc import Callable, Iterable, Sequence


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("no value to return")
    return stack[-1]


class MinStack:
    """A stack that also reports its smallest value."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._min: int | None = None

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put ``val`` on top."""
        if self._min is None or val < self._min:
            self._min = val
        self._items.append(val)

    def pop(self) -> None:
        """Remove the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()
        self._min = min(self._items) if self._items else None

    def top(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest value held."""
        if self._min is None:
            raise IndexError("minimum of an empty stack")
        return self._min


_PAIRS = {")": "(", "}": "{", "]": "["}


def is_valid_parentheses(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in "({[":
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        if ch in _PAIRS and top != _PAIRS[ch]:
            return False
    return not stack


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs, in sorted order."""
    result: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if opened == closed == n:
            result.append(prefix)
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if opened > closed:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days until a warmer one (0 if none)."""
    answer = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            answer[earlier] = day - earlier
        pending.append(day)
    return answer


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under the histogram."""
    stack: list[tuple[int, int]] = []
    best = 0
    for index, height in enumerate(heights):
        start = index
        while stack and stack[-1][1] > height:
            previous_index, previous_height = stack.pop()
            best = max(best, (index - previous_index) * previous_height)
            start = previous_index
        stack.append((start, height))
    for start, height in stack:
        best = max(best, height * (len(heights) - start))
    return best


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars reach ``target``."""
    cars = sorted(zip(position, speed, strict=True), reverse=True)
    arrivals: list[float] = []
    for start, pace in cars:
        arrival = (target - start) / pace
        if not arrivals or arrival > arrivals[-1]:
            arrivals.append(arrival)
    return len(arrivals)


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` consecutive values."""
    window: deque[int] = deque()
    answer: list[int] = []
    for index, value in enumerate(nums):
        if window and window[0] < index - k + 1:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            answer.append(nums[window[0]])
    return answer


class SmallestInfiniteSet:
    """A set starting with 1 to 1000 that hands out its smallest member."""

    def __init__(self) -> None:
        self._heap = list(range(1, 1001))
        self._members = set(self._heap)

    def pop_smallest(self) -> int:
        """Remove and return the smallest member."""
        if not self._heap:
            raise IndexError("the set is empty")
        value = heapq.heappop(self._heap)
        self._members.remove(value)
        return value

    def add_back(self, num: int) -> None:
        """Add ``num`` if it is not already a member."""
        if num not in self._members:
            self._members.add(num)
            heapq.heappush(self._heap, num)