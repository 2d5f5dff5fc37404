"""Integer properties built on prime factorization: factors, gcd and lcm."""

from __future__ import annotations

import math

__all__ = ["prime_factorization", "gcd", "lcm"]


def prime_factorization(n: int) -> list[int]:
    """Return the prime factors of ``|n|`` in ascending order, with repetition.

    Zero, one and minus one have no prime factors and give an empty list.
    """
    n = abs(n)
    factors: list[int] = []
    candidate = 2
    while candidate * candidate <= n:
        while n % candidate == 0:
            factors.append(candidate)
            n //= candidate
        candidate += 1
    if n > 1:
        factors.append(n)
    return factors


def gcd(x: int, y: int) -> int:
    """Return the product of the prime factors ``x`` and ``y`` share.

    The result is always positive. Zero has no prime factors, so any
    pair that contains zero has a gcd of 1.
    """
    if x == 0 or y == 0:
        return 1
    return math.gcd(x, y)


def lcm(x: int, y: int) -> int:
    """Return the product of the union of the prime factors of ``x`` and ``y``.

    The result is always positive. Zero contributes no prime factors, so
    ``lcm(0, y)`` is ``|y|`` (or 1 when ``y`` has no factors either).
    """
    return math.lcm(abs(x) or 1, abs(y) or 1)