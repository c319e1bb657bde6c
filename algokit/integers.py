"""Predicates and small computations on integers."""

import math


def is_palindrome_number(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def integer_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down.

    Values below 2 (including negative ones) are returned unchanged.
    """
    if x < 2:
        return x
    return math.isqrt(x)


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains.

    For a negative ``num`` the result is the negated sum of its digits,
    taken once.
    """
    if num < 0:
        return -sum(int(digit) for digit in str(-num))
    if num == 0:
        return 0
    return 1 + (num - 1) % 9


def is_perfect_square(num: int) -> bool:
    """Return True if ``num`` is the square of a non-negative integer."""
    if num < 0:
        return False
    root = math.isqrt(num)
    return root * root == num


def count_odds(low: int, high: int) -> int:
    """Count the odd integers in the closed range ``[low, high]``."""
    return (high + 1) // 2 - low // 2