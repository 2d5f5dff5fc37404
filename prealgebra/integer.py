"""Whole numbers that take part in fraction-based arithmetic."""

from __future__ import annotations

from prealgebra.number import Number

__all__ = ["Integer"]


class Integer(Number):
    """A whole number; its fractional form is ``value / 1``."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        self._value = int(value)

    @property
    def value(self) -> int:
        return self._value

    def place_values(self) -> dict[int, int]:
        """Map each place (0 for units, 1 for tens, ...) to its signed digit.

        Every place up to the leading digit is present, zeros included.
        Zero itself has no places.
        """
        sign = -1 if self._value < 0 else 1
        digits = str(abs(self._value)).lstrip("0")
        return {
            place: int(digit) * sign
            for place, digit in enumerate(reversed(digits))
        }

    def to_fractional_values(self) -> tuple[int, int]:
        return self._value, 1

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Integer({self._value})"