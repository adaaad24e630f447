"""Hash-table problems: happy numbers, anagrams, intersections and counting."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Return True if repeatedly summing the squares of the digits of ``n`` reaches 1."""
    seen: set[int] = set()
    while True:
        n = _digit_square_sum(n)
        if n == 1:
            return True
        if n in seen:
            return False
        seen.add(n)


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    if len(s) != len(t):
        return False
    remaining = Counter(s)
    for ch in t:
        remaining[ch] -= 1
        if remaining[ch] < 0:
            return False
    return True


def intersection(nums1: Iterable[Hashable], nums2: Iterable[Hashable]) -> list:
    """Return the distinct values found in both inputs, in order of first appearance in ``nums2``."""
    present = set(nums1)
    result: list = []
    added: set = set()
    for value in nums2:
        if value in present and value not in added:
            result.append(value)
            added.add(value)
    return result


def intersect(nums1: Iterable[Hashable], nums2: Iterable[Hashable]) -> list:
    """Return the multiset intersection of the inputs, in the order of ``nums2``."""
    available = Counter(nums1)
    result: list = []
    for value in nums2:
        if available[value] > 0:
            result.append(value)
            available[value] -= 1
    return result


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return True if every letter of ``ransom_note`` can be taken from ``magazine``."""
    return not (Counter(ransom_note) - Counter(magazine))


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices of every substring of ``s`` that is an anagram of ``p``."""
    width = len(p)
    if width == 0 or len(s) < width:
        return []

    target = Counter(p)
    window: Counter[str] = Counter()
    starts: list[int] = []
    for right, ch in enumerate(s):
        window[ch] += 1
        left = right - width + 1
        if left < 0:
            continue
        if window == target:
            starts.append(left)
        out = s[left]
        window[out] -= 1
        if window[out] == 0:
            del window[out]
    return starts


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another, groups in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for text in strs:
        groups.setdefault("".join(sorted(text)), []).append(text)
    return list(groups.values())


def main(argv: Sequence[str] | None = None) -> int:
    """Read two words and print 1 if they are anagrams of each other, else 0."""
    words = list(argv) if argv is not None else sys.stdin.read().split()
    words += [""] * (2 - len(words))
    s, t = words[0], words[1]
    sys.stdout.write("1" if is_anagram(s, t) else "0")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())