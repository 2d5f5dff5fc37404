import pytest

from prealgebra.number import (
    Fraction,
    FractionArithmetic,
    common_denominator,
    simplify_fraction,
)

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
NONZERO_K = [k for k in range(-5, 6) if k != 0]


@pytest.mark.parametrize(
    "num, den, expected_num, expected_den",
    [
        (0, 1, 0, 1),
        (LONG_MIN, LONG_MAX, LONG_MIN, LONG_MAX),
        (LONG_MAX, LONG_MIN + 1, -LONG_MAX, -(LONG_MIN + 1)),
        (-500000000, 500000000, -500000000, 500000000),
        (500000000, -500000000, -500000000, 500000000),
        (-500000000, -500000000, 500000000, 500000000),
        (LONG_MIN, 1, LONG_MIN, 1),
        (LONG_MAX, 1, LONG_MAX, 1),
        (-500000000, 1, -500000000, 1),
        (500000000, 1, 500000000, 1),
    ],
)
def test_constructor(num, den, expected_num, expected_den):
    f = Fraction(num, den)
    assert f.numerator == expected_num
    assert f.denominator == expected_den


def test_constructor_zero_denominator():
    with pytest.raises(ValueError):
        Fraction(0, 0)


def test_equality_basic():
    assert (Fraction(2, 3) == Fraction(2, 3)) is True
    assert (Fraction(2, 3) == Fraction(-2, -3)) is True
    assert (Fraction(2, 3) == Fraction(-2, 3)) is False
    assert (Fraction(2, 3) == Fraction(2, -3)) is False
    assert (Fraction(2, 3) != Fraction(2, 3)) is False
    assert (Fraction(2, 3) != Fraction(-2, -3)) is False
    assert (Fraction(2, 3) != Fraction(-2, 3)) is True
    assert (Fraction(2, 3) != Fraction(2, -3)) is True


def test_equality_whole():
    assert (Fraction(2, 1) == Fraction(2, 1)) is True
    assert (Fraction(2, 1) == Fraction(-2, 1)) is False
    assert (Fraction(2, 1) != Fraction(2, 1)) is False
    assert (Fraction(2, 1) != Fraction(-2, 1)) is True


@pytest.mark.parametrize("k", NONZERO_K)
def test_equality_scaled(k):
    assert Fraction(k * 2, k * 3) == Fraction(k * 2, k * 3)
    assert not (Fraction(k * 2, k * 3) != Fraction(k * 2, k * 3))
    assert not (Fraction(k * 2, k * 3) == Fraction(-k * 2, k * 3))
    assert Fraction(k * 2, k * 3) != Fraction(-k * 2, k * 3)
    assert not (Fraction(k * 2, k * 3) == Fraction(k * 2, -k * 3))
    assert Fraction(k * 2, k * 3) != Fraction(k * 2, -k * 3)


@pytest.mark.parametrize("k", NONZERO_K)
def test_equality_scaled_whole(k):
    assert Fraction(k * 2, 1) == Fraction(k * 2, 1)
    assert not (Fraction(k * 2, 1) != Fraction(k * 2, 1))
    assert not (Fraction(k * 2, 1) == Fraction(-k * 2, 1))
    assert Fraction(k * 2, 1) != Fraction(-k * 2, 1)


@pytest.mark.parametrize(
    "lhs, rhs, lt, gt, le, ge",
    [
        (Fraction(2, 4), Fraction(2, 3), True, False, True, False),
        (Fraction(1, 1), Fraction(1, 1), False, False, True, True),
        (Fraction(-2, 3), Fraction(2, 4), True, False, True, False),
        (Fraction(1, 2), Fraction(50, 100), False, False, True, True),
    ],
)
def test_inequality(lhs, rhs, lt, gt, le, ge):
    assert (lhs < rhs) is lt
    assert (lhs > rhs) is gt
    assert (lhs <= rhs) is le
    assert (lhs >= rhs) is ge


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        ((2, 3), (1, 3), (3, 3)),
        ((2, 3), (-1, 3), (1, 3)),
        ((-2, 3), (1, 3), (-1, 3)),
        ((-2, 3), (-1, 3), (-3, 3)),
        ((0, 1), (0, 1), (0, 1)),
        ((1, 2), (1, 5), (7, 10)),
        ((1, 2), (-1, 5), (3, 10)),
        ((-1, 2), (-1, 5), (-7, 10)),
        ((-1, 2), (1, 5), (-3, 10)),
    ],
)
def test_addition(lhs, rhs, expected):
    assert Fraction(*lhs) + Fraction(*rhs) == Fraction(*expected)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        ((-1, 2), (1, 5), (-7, 10)),
        ((2, 3), (1, 3), (1, 3)),
        ((2, 3), (-1, 3), (3, 3)),
        ((-2, 3), (1, 3), (-3, 3)),
        ((-2, 3), (-1, 3), (-1, 3)),
        ((0, 1), (0, 1), (0, 1)),
        ((1, 2), (1, 5), (3, 10)),
        ((1, 2), (-1, 5), (7, 10)),
        ((-1, 2), (-1, 5), (-3, 10)),
    ],
)
def test_subtraction(lhs, rhs, expected):
    assert Fraction(*lhs) - Fraction(*rhs) == Fraction(*expected)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        ((2, 3), (1, 3), (2, 9)),
        ((2, 3), (-1, 3), (-2, 9)),
        ((-2, 3), (1, 3), (-2, 9)),
        ((-2, 3), (-1, 3), (2, 9)),
        ((0, 1), (0, 1), (0, 1)),
        ((1, 2), (1, 5), (1, 10)),
        ((1, 2), (-1, 5), (1, -10)),
        ((-1, 2), (-1, 5), (1, 10)),
        ((-1, 2), (1, 5), (-1, 10)),
    ],
)
def test_multiplication(lhs, rhs, expected):
    assert Fraction(*lhs) * Fraction(*rhs) == Fraction(*expected)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        ((-1, 2), (1, 5), (-5, 2)),
        ((2, 3), (1, 3), (2, 1)),
        ((2, 3), (-1, 3), (-2, 1)),
        ((-2, 3), (1, 3), (-2, 1)),
        ((-2, 3), (-1, 3), (2, 1)),
        ((1, 2), (1, 5), (5, 2)),
        ((1, 2), (-1, 5), (-5, 2)),
        ((-1, 2), (-1, 5), (5, 2)),
    ],
)
def test_division(lhs, rhs, expected):
    assert Fraction(*lhs) / Fraction(*rhs) == Fraction(*expected)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Fraction(0, 1) / Fraction(0, 1)


def test_arithmetic_results_are_reduced():
    result = Fraction(1, 2) + Fraction(1, 5)
    assert result.to_fractional_values() == (7, 10)
    result = Fraction(2, 3) / Fraction(1, 3)
    assert result.to_fractional_values() == (2, 1)


def test_arithmetic_object_compare():
    arithmetic = FractionArithmetic()
    assert arithmetic.compare(Fraction(1, 2), Fraction(50, 100)) == 0
    assert arithmetic.compare(Fraction(2, 4), Fraction(2, 3)) < 0
    assert arithmetic.compare(Fraction(2, 3), Fraction(2, 4)) > 0
    assert arithmetic.multiply(Fraction(2, 3), Fraction(1, 3)) == Fraction(2, 9)


def test_simplified():
    assert Fraction(50, 100).simplified().to_fractional_values() == (1, 2)
    assert simplify_fraction(Fraction(-6, 9)).to_fractional_values() == (-2, 3)
    assert Fraction(0, 5).simplified().to_fractional_values() == (0, 5)


def test_simplified_keeps_value():
    f = Fraction(360, -84)
    assert f.simplified() == f


def test_common_denominator():
    lhs, rhs = common_denominator(Fraction(1, 2), Fraction(1, 3))
    assert lhs.to_fractional_values() == (3, 6)
    assert rhs.to_fractional_values() == (2, 6)


def test_common_denominator_preserves_values():
    a, b = Fraction(-2, 3), Fraction(1, 5)
    x, y = common_denominator(a, b)
    assert x == a and y == b
    assert x.denominator == y.denominator


def test_string_forms():
    assert str(Fraction(2, -3)) == "-2/3"
    assert repr(Fraction(1, 2)) == "Fraction(1, 2)"


def test_hash_consistent_with_equality():
    assert hash(Fraction(1, 2)) == hash(Fraction(50, 100))
    assert len({Fraction(1, 2), Fraction(50, 100), Fraction(-2, -4)}) == 1


def test_comparison_with_other_types_not_supported():
    assert (Fraction(1, 1) == 1) is False
    with pytest.raises(TypeError):
        Fraction(1, 1) + 1