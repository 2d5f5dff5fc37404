"""Decimal numbers stored as a table of place values."""

from __future__ import annotations

from collections.abc import Mapping
from functools import reduce

from prealgebra.decimal_parser import RegexDecimalStringParser
from prealgebra.integer_properties import lcm
from prealgebra.number import Number

__all__ = ["Decimal"]

_PARSER = RegexDecimalStringParser()


def _add_terms(x: tuple[int, int], y: tuple[int, int]) -> tuple[int, int]:
    common = lcm(x[1], y[1])
    return (common // x[1]) * x[0] + (common // y[1]) * y[0], common


class Decimal(Number):
    """A decimal held as place -> signed digit (0 is units, -1 tenths, ...)."""

    __slots__ = ("_places",)

    def __init__(self, value: str | Mapping[int, int] | Decimal) -> None:
        if isinstance(value, Decimal):
            places: Mapping[int, int] = value._places
        elif isinstance(value, str):
            places = _PARSER.from_string(value)
        elif isinstance(value, Mapping):
            places = value
        else:
            raise TypeError(
                f"Decimal expects a string or a place-value mapping, not {type(value).__name__}"
            )
        self._places = {int(place): int(digit) for place, digit in places.items()}

    def place_values(self) -> dict[int, int]:
        return dict(self._places)

    def to_fractional_values(self) -> tuple[int, int]:
        terms = [
            (digit, 10 ** -place) if place < 0 else (digit * 10**place, 1)
            for place, digit in sorted(self._places.items())
        ]
        if not terms:
            return 0, 1
        return reduce(_add_terms, reversed(terms))

    def __str__(self) -> str:
        if not self._places:
            return "0"
        highest = max(self._places)
        lowest = min(min(self._places), -1)
        negative = self._places[highest] < 0
        sign = -1 if negative else 1

        parts = ["-"] if negative else []
        if highest < 0:
            parts.append("0.")
        for place in range(highest, lowest - 1, -1):
            parts.append(str(self._places.get(place, 0) * sign))
            if place == 0:
                parts.append(".")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Decimal('{self}')"