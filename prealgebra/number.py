"""Numbers with exact fraction-based comparison and arithmetic."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from prealgebra.integer_properties import gcd, lcm

__all__ = [
    "Number",
    "FractionArithmetic",
    "Fraction",
    "simplify_fraction",
    "common_denominator",
]

FractionalValues = tuple[int, int]


class Number(ABC):
    """A value that can be expressed as a numerator over a positive denominator."""

    __slots__ = ()

    @abstractmethod
    def to_fractional_values(self) -> FractionalValues:
        """Return ``(numerator, denominator)`` for this value."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.compare(self, other) >= 0

    def __hash__(self) -> int:
        numerator, denominator = self.to_fractional_values()
        divisor = math.gcd(numerator, denominator) or 1
        return hash((numerator // divisor, denominator // divisor))

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.add(self, other)

    def __sub__(self, other: object) -> Fraction:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.subtract(self, other)

    def __mul__(self, other: object) -> Fraction:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.multiply(self, other)

    def __truediv__(self, other: object) -> Fraction:
        if not isinstance(other, Number):
            return NotImplemented
        return _ARITHMETIC.divide(self, other)


def _change_base(u: FractionalValues, v: FractionalValues) -> tuple[FractionalValues, FractionalValues]:
    """Rewrite two fractions over their least common denominator."""
    common = lcm(u[1], v[1])
    mu, mv = common // u[1], common // v[1]
    return (u[0] * mu, u[1] * mu), (v[0] * mv, v[1] * mv)


def _reduced(numerator: int, denominator: int) -> Fraction:
    divisor = gcd(numerator, denominator)
    return Fraction(numerator // divisor, denominator // divisor)


class FractionArithmetic:
    """Compares and combines numbers through their fractional values."""

    def compare(self, lhs: Number, rhs: Number) -> int:
        """Return a value below, equal to or above zero as ``lhs`` is below, equal to or above ``rhs``."""
        u, v = _change_base(lhs.to_fractional_values(), rhs.to_fractional_values())
        return u[0] - v[0]

    def add(self, lhs: Number, rhs: Number) -> Fraction:
        u, v = _change_base(lhs.to_fractional_values(), rhs.to_fractional_values())
        return _reduced(u[0] + v[0], u[1])

    def subtract(self, lhs: Number, rhs: Number) -> Fraction:
        u, v = _change_base(lhs.to_fractional_values(), rhs.to_fractional_values())
        return _reduced(u[0] - v[0], u[1])

    def multiply(self, lhs: Number, rhs: Number) -> Fraction:
        u, v = lhs.to_fractional_values(), rhs.to_fractional_values()
        return _reduced(u[0] * v[0], u[1] * v[1])

    def divide(self, lhs: Number, rhs: Number) -> Fraction:
        u, v = lhs.to_fractional_values(), rhs.to_fractional_values()
        if v[0] == 0:
            raise ZeroDivisionError(f"Cannot divide by number {rhs}")
        return _reduced(u[0] * v[1], u[1] * v[0])


_ARITHMETIC = FractionArithmetic()


class Fraction(Number):
    """A numerator over a non-zero denominator; the sign is kept on the numerator."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int) -> None:
        if denominator == 0:
            raise ValueError("Fraction cannot have denominator 0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def simplified(self) -> Fraction:
        """Return this fraction in lowest terms."""
        return simplify_fraction(self)

    def to_fractional_values(self) -> FractionalValues:
        return self._numerator, self._denominator

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"


def simplify_fraction(fraction: Fraction) -> Fraction:
    """Return ``fraction`` divided through by the gcd of its terms."""
    divisor = gcd(fraction.numerator, fraction.denominator)
    return Fraction(fraction.numerator // divisor, fraction.denominator // divisor)


def common_denominator(lhs: Fraction, rhs: Fraction) -> tuple[Fraction, Fraction]:
    """Return both fractions rewritten over the lcm of their denominators."""
    common = lcm(lhs.denominator, rhs.denominator)
    return (
        Fraction(lhs.numerator * common // lhs.denominator, common),
        Fraction(rhs.numerator * common // rhs.denominator, common),
    )