"""Binary-search based lookups."""

from __future__ import annotations

from collections.abc import Sequence


def is_perfect_square(num: int) -> bool:
    """Return True if ``num`` is the square of an integer."""
    low, high = 0, num
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square > num:
            high = mid - 1
        elif square < num:
            low = mid + 1
        else:
            return True
    return False


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the ascending ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value < target:
            low = mid + 1
        elif value > target:
            high = mid - 1
        else:
            return mid
    return -1