"""Routines on lists of numbers."""

from __future__ import annotations

from itertools import accumulate, combinations, groupby
from typing import Optional, Sequence


class NumArray:
    """Answers sums over index ranges of a fixed sequence in constant time."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._prefix = list(accumulate(nums, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of the elements from ``left`` to ``right`` inclusive."""
        if left < 0 or right >= len(self) or left > right:
            raise IndexError(f"invalid range [{left}, {right}] for {len(self)} elements")
        return self._prefix[right + 1] - self._prefix[left]


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return the first pair of indices whose values add up to ``target``.

    Pairs are tried in order of the first index, then the second.
    Returns None when no pair exists.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def remove_duplicates(nums: list) -> int:
    """Collapse runs of equal values at the front of ``nums``, in place.

    Returns the number of values kept; the first that many items of
    ``nums`` hold them, and the list keeps its length.
    """
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums: list, val) -> int:
    """Move the items not equal to ``val`` to the front of ``nums``, in place.

    Returns how many items were kept; the list keeps its length.
    """
    kept = [item for item in nums if item != val]
    nums[: len(kept)] = kept
    return len(kept)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the first index whose value is not less than ``target``."""
    return next((i for i, value in enumerate(nums) if target <= value), len(nums))


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits``.

    An empty sequence yields an empty list.
    """
    if not digits:
        return []
    result = []
    carry = 1
    for digit in reversed(digits):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: list) -> None:
    """Move every zero to the end of ``nums`` in place, keeping the rest in order."""
    nonzero = [item for item in nums if item != 0]
    zeros = [item for item in nums if item == 0]
    nums[:] = nonzero + zeros


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones in ``nums``."""
    return max((sum(1 for _ in run) for value, run in groupby(nums) if value == 1), default=0)


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``nums``, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = left + (right - left) // 2
        value = nums[middle]
        if target == value:
            return middle
        if target > value:
            left = middle + 1
        else:
            right = middle - 1
    return -1


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave the halves ``x1..xn`` and ``y1..yn`` as ``x1, y1, x2, y2, ...``.

    Raises ValueError unless ``nums`` holds exactly ``2 * n`` items.
    """
    if n < 0 or len(nums) != 2 * n:
        raise ValueError(f"expected {2 * n} items, got {len(nums)}")
    return [item for pair in zip(nums[:n], nums[n:]) for item in pair]