"""Exact integers, fractions and decimals with rational arithmetic."""

__version__ = "0.1.0"

__all__ = ["decimal_parser", "decimals", "integer", "integer_properties", "number"]