"""Parsing of decimal strings into place-value tables."""

from __future__ import annotations

import re

__all__ = ["RegexDecimalStringParser"]

_FULL_MATCH = r"^[+-]?((\d*\.\d*)|(\d+))$"
_MATCH_NEGATIVE = r"^-.*$"
_MATCH_PREFIX = r".*((\d+\.)|(\d+)).*"
_MATCH_SUFFIX = r".*\.\d+.*"

_FULL_RE = re.compile(_FULL_MATCH, re.ASCII)
_NEGATIVE_RE = re.compile(_MATCH_NEGATIVE, re.ASCII)
_PREFIX_RE = re.compile(_MATCH_PREFIX, re.ASCII)
_SUFFIX_RE = re.compile(_MATCH_SUFFIX, re.ASCII)

# A signed integer as read after optional leading whitespace.
_LONG = r"\s*([+-]?\d+)"

# Scans for the whole part: a plain signed integer, then one after a run of signs.
_PREFIX_SCANS = (
    re.compile(_LONG, re.ASCII),
    re.compile(r"[+-]+(?![+-])" + _LONG, re.ASCII),
)

# Scans for the fractional part, each overriding the previous on success.
_SUFFIX_SCANS = (
    re.compile(r"\." + _LONG, re.ASCII),
    re.compile(r"\s*[+-]?\d+\." + _LONG, re.ASCII),
    re.compile(r"-\." + _LONG, re.ASCII),
    re.compile(r"-\s*[+-]?\d+\." + _LONG, re.ASCII),
)


def _scan(patterns: tuple[re.Pattern[str], ...], s: str) -> int:
    value = 0
    if _PREFIX_RE.search(s) is None:
        return value
    for pattern in patterns:
        match = pattern.match(s)
        if match is not None:
            value = int(match.group(1))
    return value


def _digit_values(text: str) -> list[int]:
    return [ord(ch) - ord("0") for ch in text]


class RegexDecimalStringParser:
    """Validates decimal strings and splits them into signed place values."""

    def validate_full_match(self, s: str) -> str:
        """Return ``s`` if it has the shape of a decimal, else raise ValueError."""
        if _FULL_RE.fullmatch(s):
            return s
        raise ValueError(
            f"Decimal string {s} did not match regular expression {_FULL_MATCH}"
        )

    def validate_partial_match(self, s: str) -> str:
        """Return ``s`` if it holds a digit on either side of the point, else raise ValueError."""
        if _PREFIX_RE.fullmatch(s) or _SUFFIX_RE.fullmatch(s):
            return s
        raise ValueError(
            f"Decimal string {s} did not match either regular expression "
            f"{_MATCH_PREFIX} or {_MATCH_SUFFIX}"
        )

    def validate_decimal(self, s: str) -> str:
        """Return ``s`` if it passes both the full and the partial check."""
        self.validate_full_match(s)
        return self.validate_partial_match(s)

    def is_negative(self, s: str) -> bool:
        return _NEGATIVE_RE.fullmatch(s) is not None

    def match_prefix(self, s: str) -> str:
        """Return the digits before the point, without sign, as a string."""
        return str(_scan(_PREFIX_SCANS, s))

    def match_suffix(self, s: str) -> str:
        """Return the digits after the point as a string."""
        return str(_scan(_SUFFIX_SCANS, s))

    def from_string(self, s: str) -> dict[int, int]:
        """Map each non-zero place of ``s`` to its signed digit."""
        sign = -1 if self.is_negative(s) else 1
        places: dict[int, int] = {}

        prefix = _digit_values(self.match_prefix(s))
        for offset, value in enumerate(prefix):
            if value:
                places[len(prefix) - offset - 1] = value * sign

        for offset, value in enumerate(_digit_values(self.match_suffix(s))):
            if value:
                places[-(offset + 1)] = value * sign

        return places