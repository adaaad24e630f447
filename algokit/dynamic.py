"""Dynamic-programming sequences."""

from __future__ import annotations

MODULUS = 1_000_000_007


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 1000000007."""
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, (previous + current) % MODULUS
    return current