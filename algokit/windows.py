"""Sliding-window problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest contiguous run summing to at least ``target``, or 0."""
    best = len(nums) + 1
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target and left <= right:
            best = min(best, right - left + 1)
            total -= nums[left]
            left += 1
    return 0 if best == len(nums) + 1 else best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``, or ''."""
    if not t or len(s) < len(t):
        return ""

    needed = Counter(t)
    window: Counter[str] = Counter()
    matched = 0
    left = 0
    best_start, best_len = 0, None

    for right, ch in enumerate(s):
        if ch not in needed:
            continue
        window[ch] += 1
        if window[ch] == needed[ch]:
            matched += 1

        while matched == len(needed):
            size = right - left + 1
            if best_len is None or size < best_len:
                best_start, best_len = left, size
            out = s[left]
            if out in needed:
                window[out] -= 1
                if window[out] < needed[out]:
                    matched -= 1
            left += 1

    if best_len is None:
        return ""
    return s[best_start:best_start + best_len]


def total_fruit(fruits: Sequence[Hashable]) -> int:
    """Return the longest contiguous run holding at most two distinct kinds."""
    basket: Counter[Hashable] = Counter()
    left = 0
    best = 0
    for right, kind in enumerate(fruits):
        basket[kind] += 1
        while len(basket) > 2:
            dropped = fruits[left]
            basket[dropped] -= 1
            if basket[dropped] == 0:
                del basket[dropped]
            left += 1
        best = max(best, right - left + 1)
    return best