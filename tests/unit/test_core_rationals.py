from fractions import Fraction

import pytest

from hugenum.core import (
    HugeNumber,
    NAN,
    ZERO,
    gcd,
    lcm,
    reduce_fraction,
    to_decimal_form,
    to_denominator,
    from_fraction,
)


def _triple(x: HugeNumber):
    return (x.significand, x.exponent, x.denominator)


THIRD = HugeNumber.from_components(1, 0, 3)


# -----------------------------
# GCD / LCM
# -----------------------------

@pytest.mark.parametrize(
    "a, b, g, m",
    [
        (12, 18, 6, 36),
        (3, 5, 1, 15),
        (0, 5, 5, 0),
        (256, 257, 1, None),
        (255, 257, 1, 65535),
    ],
)
def test_gcd_and_lcm(a, b, g, m):
    print(f"[gcd_lcm] a={a}, b={b} -> expect gcd={g}, lcm={m}")
    assert gcd(a, b) == g
    assert lcm(a, b) == m


# -----------------------------
# Reduction and collapse
# -----------------------------

def test_reduce_fraction_divides_by_gcd():
    print("[reduce] raw 2/4 -> 1/2; already reduced 1/3 unchanged")
    assert _triple(reduce_fraction(HugeNumber(2, 0, 4))) == (1, 0, 2)
    assert reduce_fraction(THIRD) is THIRD
    assert reduce_fraction(NAN) is NAN


@pytest.mark.parametrize(
    "value, expected",
    [
        (HugeNumber.from_components(1, 0, 3), (333333333333333333, -18, 1)),
        (HugeNumber.from_components(2, 0, 3), (666666666666666666, -18, 1)),
        (HugeNumber.from_components(-1, 0, 3), (-333333333333333333, -18, 1)),
        (HugeNumber.from_components(1, 5, 7), (142857142857142857, -13, 1)),
        (HugeNumber.from_components(7), (7, 0, 1)),
    ],
)
def test_to_decimal_form_truncates(value, expected):
    print(f"[collapse] {value} -> expect {expected} (truncated, not rounded)")
    got = to_decimal_form(value)
    print("got ->", _triple(got))
    assert _triple(got) == expected


# -----------------------------
# ToDenominator
# -----------------------------

def test_to_denominator_widens_without_reducing():
    print("[to_denominator] 1/3 over 6 -> 2/6 (unreduced); 5 over 7 -> 35/7")
    assert _triple(to_denominator(THIRD, 6)) == (2, 0, 6)
    assert _triple(to_denominator(HugeNumber.from_components(5), 7)) == (35, 0, 7)


def test_to_denominator_narrows_when_exact():
    print("[to_denominator] raw 2/6 over 3 -> 1/3")
    assert _triple(to_denominator(HugeNumber(2, 0, 6), 3)) == (1, 0, 3)


def test_to_denominator_falls_back_to_decimal():
    print("[to_denominator] 1/3 over 4 is impossible -> decimal form")
    got = to_denominator(THIRD, 4)
    assert got.denominator == 1
    assert got == to_decimal_form(THIRD)
    print("1/3 over 1 -> decimal form")
    assert _triple(to_denominator(THIRD, 1)) == _triple(to_decimal_form(THIRD))


def test_to_denominator_special_targets():
    print("[to_denominator] target 0 -> signed infinity (NaN for zero); sentinels and decimals unchanged")
    assert to_denominator(THIRD, 0).is_positive_infinity()
    assert to_denominator(HugeNumber.from_components(-1, 0, 3), 0).is_negative_infinity()
    assert to_denominator(ZERO, 0).is_nan()
    assert to_denominator(NAN, 3).is_nan()
    scaled = HugeNumber.from_components(25, -1)
    assert to_denominator(scaled, 3) is scaled


@pytest.mark.parametrize("d", [2, 3, 4, 6, 7, 9, 300, 65535])
def test_to_denominator_round_trip_collapses_like_direct(d):
    print(f"[round_trip] ToDenominator(ToDenominator(1/3, {d}), 1) == collapse(1/3)")
    via = to_denominator(to_denominator(THIRD, d), 1)
    direct = to_decimal_form(THIRD)
    print("via ->", _triple(via), "direct ->", _triple(direct))
    assert _triple(via) == _triple(direct)


# -----------------------------
# Exact Fraction intake
# -----------------------------

@pytest.mark.parametrize(
    "q, expected",
    [
        (Fraction(1, 8), (125, -3, 1)),
        (Fraction(1, 12), (25, -2, 3)),
        (Fraction(-7, 1), (-7, 0, 1)),
        (Fraction(0, 1), (0, 0, 1)),
        (Fraction(22, 7), (22, 0, 7)),
    ],
)
def test_from_fraction_keeps_exact_values(q, expected):
    print(f"[from_fraction] {q} -> expect {expected}")
    got = from_fraction(q)
    print("got ->", _triple(got))
    assert _triple(got) == expected
    assert got == q


def test_from_fraction_large_denominator_collapses():
    print("[from_fraction] 1/65537 -> decimal form")
    got = from_fraction(Fraction(1, 65537))
    assert got.denominator == 1
    assert got < Fraction(1, 65537)
