# prealgebra

Exact numbers for pre-algebra work: integers, fractions and decimals that
compare and combine as rational values, with no floating-point rounding.

## Installation

```
pip install .
```

## Numbers

Every number type derives from `Number` (in `prealgebra.number`) and can be
reduced to a numerator/denominator pair with `to_fractional_values()`.
Comparison (`==`, `<`, `<=`, `>`, `>=`) and arithmetic (`+`, `-`, `*`, `/`)
work across types, and every arithmetic result is a `Fraction` in lowest
terms. Equal values hash equally, so numbers can be used as dictionary keys.

The operations are carried out by `FractionArithmetic`, whose methods
`compare`, `add`, `subtract`, `multiply` and `divide` may also be called
directly.

### Fractions

```python
from prealgebra.number import Fraction

half = Fraction(1, 2)
fifth = Fraction(1, -5)             # sign moves to the numerator: -1/5

print(half + fifth)                 # 3/10
print(half / fifth)                 # -5/2
print(Fraction(50, 100) == half)    # True
print(Fraction(6, 8).simplified())  # 3/4
```

`numerator` and `denominator` are read-only properties. A zero denominator
raises `ValueError`; dividing by a number equal to zero raises
`ZeroDivisionError`.

The helpers `simplify_fraction(fraction)` and
`common_denominator(lhs, rhs)` reduce a fraction, or return two fractions
rewritten over the least common multiple of their denominators.

### Integers

```python
from prealgebra.integer import Integer

n = Integer(-2500)
print(n / Integer(50) == Integer(-50))  # True
print(n.value)                          # -2500
print(n.place_values())                 # {0: 0, 1: 0, 2: -5, 3: -2}
```

`place_values()` maps each place (0 for units, 1 for tens, ...) up to the
leading digit to its signed digit; `Integer(0)` has no places.

### Decimals

Decimals are built from strings such as `"7.6"`, `"-.258"` or `"+580"`, from
a mapping of place to signed digit, or from another `Decimal`. Only the
non-zero places are kept (0 for units, negative for tenths and below).

```python
from prealgebra.decimals import Decimal

d = Decimal("-90.95")
print(d)                   # -90.95
print(d.place_values())    # {1: -9, -1: -9, -2: -5}
print(Decimal("580"))      # 580.0
print(Decimal("375.68") / Decimal("117.4") == Decimal("3.2"))  # True
```

A value with no places prints as `0`.

`RegexDecimalStringParser` in `prealgebra.decimal_parser` does the string
parsing, and may be used directly: `validate_full_match`,
`validate_partial_match` and `validate_decimal` return the string or raise
`ValueError`; `is_negative`, `match_prefix`, `match_suffix` and
`from_string` pick a string apart. Note that constructing a `Decimal` from a
string does not validate it first.

### Integer properties

`prealgebra.integer_properties` offers `prime_factorization(n)` (the prime
factors of `|n|` in ascending order, with repetition), `gcd(x, y)` and
`lcm(x, y)`. Results are always positive; zero has no prime factors, so
`gcd` of any pair containing zero is 1 and `lcm(0, y)` is `|y|` (or 1).

## What it does not do

This is a library only: there is no command-line program. Decimals are not
rounded or formatted beyond their own digits, and arithmetic results are
always fractions, never decimals.

## Running the tests

```
pip install ".[test]"
pytest
```