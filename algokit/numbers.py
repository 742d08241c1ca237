"""Integer and floating-point number algorithms."""

from __future__ import annotations

import math

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def hamming_weight(n: int) -> int:
    """Return the number of set bits in the 32-bit form of ``n``."""
    return bin(n & 0xFFFFFFFF).count("1")


def _power(base: float, exponent: int) -> float:
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def my_pow(x: float, n: int) -> float:
    """Return ``x`` raised to ``n``, with the 32-bit extremes of ``n`` cut short."""
    if x == 1:
        return 1.0
    if n == INT_MAX:
        return -1.0 if x == -1 else 0.0
    if n == INT_MIN:
        return 1.0 if x == -1 else 0.0
    answer = _power(x, abs(n))
    if n < 0:
        if answer == 0:
            return math.copysign(math.inf, answer)
        answer = 1 / answer
    return answer


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down."""
    if x < 0:
        raise ValueError("x must not be negative")
    return math.isqrt(x)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if that leaves the 32-bit range."""
    digits = str(abs(x))[::-1]
    limit = str(INT_MAX)
    result = int(digits) if len(digits) < len(limit) or digits <= limit else 0
    return -result if x < 0 else result


def is_palindrome_number(x: int) -> bool:
    """Return whether ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the number written by ``digits``, in place, and return it."""
    if not digits:
        raise ValueError("digits must not be empty")
    digits[-1] += 1
    for index in range(len(digits) - 1, -1, -1):
        if digits[index] <= 9:
            break
        digits[index] = 0
        if index == 0:
            digits.insert(0, 1)
        else:
            digits[index - 1] += 1
    return digits