"""Operations that rewrite a list in place."""

from __future__ import annotations

from itertools import groupby


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in ``nums`` and return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of ``val`` from ``nums`` and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end of ``nums``, keeping the order of the other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))