"""Two-pointer string and array problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

BACKSPACE = "#"


def apply_backspaces(text: str) -> str:
    """Return ``text`` as typed, with each '#' erasing the preceding character."""
    typed: list[str] = []
    for ch in text:
        if ch != BACKSPACE:
            typed.append(ch)
        elif typed:
            typed.pop()
    return "".join(typed)


def backspace_compare(s: str, t: str) -> bool:
    """Return True if ``s`` and ``t`` give the same text once backspaces apply."""
    return apply_backspaces(s) == apply_backspaces(t)


def sorted_squares(nums: Iterable[int]) -> list[int]:
    """Return the squares of the ascending ``nums`` in ascending order."""
    remaining = deque(nums)
    largest_first: list[int] = []
    while remaining:
        if remaining[0] * remaining[0] < remaining[-1] * remaining[-1]:
            value = remaining.pop()
        else:
            value = remaining.popleft()
        largest_first.append(value * value)
    largest_first.reverse()
    return largest_first