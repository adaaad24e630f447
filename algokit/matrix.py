"""Spiral traversal and construction of matrices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import count
from typing import TypeVar

T = TypeVar("T")


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []

    result: list[T] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1

    while True:
        result.extend(matrix[top][left:right + 1])
        top += 1
        if top > bottom:
            break
        result.extend(row[right] for row in matrix[top:bottom + 1])
        right -= 1
        if right < left:
            break
        result.extend(reversed(matrix[bottom][left:right + 1]))
        bottom -= 1
        if bottom < top:
            break
        result.extend(row[left] for row in reversed(matrix[top:bottom + 1]))
        left += 1
        if left > right:
            break
    return result


def generate_matrix(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` matrix filled with 1..n*n in clockwise spiral order."""
    grid = [[0] * n for _ in range(n)]
    numbers = count(1)
    top, bottom, left, right = 0, n - 1, 0, n - 1

    while top <= bottom and left <= right:
        for j in range(left, right + 1):
            grid[top][j] = next(numbers)
        top += 1
        for i in range(top, bottom + 1):
            grid[i][right] = next(numbers)
        right -= 1
        for j in range(right, left - 1, -1):
            grid[bottom][j] = next(numbers)
        bottom -= 1
        for i in range(bottom, top - 1, -1):
            grid[i][left] = next(numbers)
        left += 1
    return grid