import math

import pytest

from algokit.numbers import (
    hamming_weight,
    is_palindrome_number,
    my_pow,
    my_sqrt,
    plus_one,
    reverse_integer,
)


@pytest.mark.parametrize("k", [0, 1, 5, 31])
def test_hamming_weight_power_of_two(k):
    assert hamming_weight(2**k) == hamming_weight(1)


@pytest.mark.parametrize("k", [1, 7, 20, 32])
def test_hamming_weight_low_bits(k):
    assert hamming_weight(2**k - 1) == k


def test_hamming_weight_negative_uses_32_bits():
    assert hamming_weight(-1) == 32


def test_my_pow_basic():
    assert my_pow(2.0, 10) == 1024.0
    assert my_pow(2.0, -2) == 0.25


@pytest.mark.parametrize("x", [0.5, 2.0, -3.0])
def test_my_pow_zero_exponent(x):
    assert my_pow(x, 0) == my_pow(1.0, 12345)


@pytest.mark.parametrize("x, n", [(1.5, 7), (-2.0, 5), (0.9, 30)])
def test_my_pow_inverse(x, n):
    assert my_pow(x, n) * my_pow(x, -n) == pytest.approx(1.0)


def test_my_pow_int_extremes():
    assert my_pow(2.0, 2**31 - 1) == 0.0
    assert my_pow(-1.0, 2**31 - 1) == -1.0
    assert my_pow(-1.0, -(2**31)) == 1.0


def test_my_pow_zero_to_negative_power():
    assert my_pow(0.0, -3) == math.inf


@pytest.mark.parametrize("x", [0, 1, 2, 8, 9, 10, 2147395599, 2**31 - 1])
def test_my_sqrt_floor(x):
    r = my_sqrt(x)
    assert r * r <= x < (r + 1) * (r + 1)


def test_my_sqrt_negative_raises():
    with pytest.raises(ValueError):
        my_sqrt(-4)


@pytest.mark.parametrize("x", [123, -4567, 1, 2000000001])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


def test_reverse_integer_sign():
    assert reverse_integer(-123) == -321


def test_reverse_integer_overflow():
    assert reverse_integer(1534236469) == 0


def test_is_palindrome_number():
    assert is_palindrome_number(121) is True
    assert is_palindrome_number(-121) is False
    assert is_palindrome_number(10) is False


def test_plus_one_carries():
    assert plus_one([9, 9]) == [1, 0, 0]


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [1, 9], [0]])
def test_plus_one_adds_one_in_place(digits):
    before = int("".join(map(str, digits)))
    result = plus_one(digits)
    assert result is digits
    assert int("".join(map(str, result))) == before + 1


def test_plus_one_empty_raises():
    with pytest.raises(ValueError):
        plus_one([])