from fractions import Fraction

import pytest

from hugenum.core import (
    HugeNumber,
    MILLI,
    EPSILON,
    HALF,
    THIRD,
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    ZERO,
    NEGATIVE_ZERO,
    ONE,
    to_huge,
)
from hugenum.functions import (
    INTEGER_POWER_LIMIT,
    pow,
    sqrt,
    cbrt,
    root_n,
    hypot,
)


def _h(x):
    return to_huge(x)


# -----------------------------
# pow: exact integer exponents
# -----------------------------

@pytest.mark.parametrize(
    "x, y, expected",
    [
        ("2", "10", "1024"),
        ("2", "-2", "0.25"),
        ("-2", "3", "-8"),
        ("-2", "4", "16"),
        ("1.5", "2", "2.25"),
        ("10", "18", "1e18"),
    ],
)
def test_pow_integer_exponents_are_exact(x, y, expected):
    print(f"[pow-int] {x} ** {y} -> expect exactly {expected}")
    got = pow(_h(x), _h(y))
    print("got ->", got)
    assert got == _h(expected)
    assert got.denominator == 1


def test_pow_fractional_exponents(close):
    print("[pow-frac] 2 ** 0.5 ~ sqrt(2); 10 ** 100 (beyond the binary powering limit)")
    assert INTEGER_POWER_LIMIT < 100
    assert close(pow(_h(2), _h("0.5")), "1.414213562373095049", "1e-15")
    assert close(pow(_h(10), _h(100)), "1e100", "1e-13", relative=True)


def test_pow_negative_base_follows_exact_exponent_fraction(close):
    print("[pow-neg] (-8) ** (1/3) ~ -2; (-8) ** 0.5 -> NaN; (-8) ** (2/3) ~ 4")
    got = pow(_h(-8), _h(Fraction(1, 3)))
    print("(-8) ** (1/3) ->", got)
    assert close(got, "-2", "1e-15")
    assert pow(_h(-8), _h("0.5")).is_nan()
    assert close(pow(_h(-8), _h(Fraction(2, 3))), "4", "1e-14")


@pytest.mark.parametrize(
    "x, y, check",
    [
        (NAN, ZERO, "nan"),
        (ONE, NAN, "nan"),
        (_h(7), ZERO, "one"),
        (ONE, POSITIVE_INFINITY, "one"),
        (ZERO, _h(-1), "+inf"),
        (ZERO, _h(2), "zero"),
        (POSITIVE_INFINITY, _h(-1), "zero"),
        (POSITIVE_INFINITY, _h("0.5"), "+inf"),
        (_h("0.5"), POSITIVE_INFINITY, "zero"),
        (_h("0.5"), NEGATIVE_INFINITY, "+inf"),
        (_h(2), POSITIVE_INFINITY, "+inf"),
        (_h(-3), NEGATIVE_INFINITY, "zero"),
        (_h(-1), POSITIVE_INFINITY, "nan"),
        (NEGATIVE_INFINITY, _h(3), "-inf"),
        (NEGATIVE_INFINITY, _h(2), "+inf"),
        (NEGATIVE_INFINITY, _h(-3), "-zero"),
        (NEGATIVE_INFINITY, _h(-2), "zero"),
    ],
)
def test_pow_special_cases(x, y, check):
    print(f"[pow-special] {x} ** {y} -> expect {check}")
    got = pow(x, y)
    print("got ->", got)
    if check == "nan":
        assert got.is_nan()
    elif check == "one":
        assert got == 1
    elif check == "+inf":
        assert got.is_positive_infinity()
    elif check == "-inf":
        assert got.is_negative_infinity()
    elif check == "zero":
        assert got.is_zero() and not got.is_negative()
    elif check == "-zero":
        assert got.is_zero() and got.is_negative()


# -----------------------------
# Roots
# -----------------------------

@pytest.mark.parametrize(
    "x, expected",
    [
        ("4", "2"),
        ("2", "1.414213562373095049"),
        ("0.25", "0.5"),
        ("1e100", "1e50"),
        ("0.0144", "0.12"),
    ],
)
def test_sqrt_values(close, x, expected):
    print(f"[sqrt] sqrt({x}) -> expect {expected}")
    got = sqrt(_h(x))
    print("got ->", got)
    assert close(got, expected, "1e-15", relative=True)


def test_sqrt_special_values():
    print("[sqrt] -1 -> NaN, -0 -> -0, +inf -> +inf, 1 -> 1")
    assert sqrt(_h(-1)).is_nan()
    z = sqrt(NEGATIVE_ZERO)
    assert z.is_zero() and z.is_negative()
    assert sqrt(POSITIVE_INFINITY).is_positive_infinity()
    assert sqrt(NEGATIVE_INFINITY).is_nan()
    assert sqrt(ONE) == 1


def test_cbrt_values(close):
    print("[cbrt] cbrt(27) ~ 3, cbrt(-27) ~ -3, cbrt(2) ~ 1.259921049894873165")
    assert close(cbrt(_h(27)), "3", "1e-15")
    assert close(cbrt(_h(-27)), "-3", "1e-15")
    assert close(cbrt(_h(2)), "1.259921049894873165", "1e-15")
    big = HugeNumber.from_components(323143878972139169, 17)
    print("[cbrt] cbrt(3.23143878972139169e34) ~ 318516531609.78082 within a thousandth")
    assert close(cbrt(big), "318516531609.78082", MILLI)


def test_cbrt_special_values():
    print("[cbrt] zeros and infinities keep their sign")
    assert cbrt(NEGATIVE_ZERO).is_negative()
    assert cbrt(ZERO).is_zero() and not cbrt(ZERO).is_negative()
    assert cbrt(NEGATIVE_INFINITY).is_negative_infinity()
    assert cbrt(NAN).is_nan()


def test_root_n(close):
    print("[root_n] 4th root of 16 ~ 2, 5th root of -32 ~ -2, (-3)rd root of 8 ~ 0.5")
    assert close(root_n(_h(16), 4), "2", "1e-15")
    assert close(root_n(_h(-32), 5), "-2", "1e-15")
    assert close(root_n(_h(8), -3), "0.5", "1e-15")
    print("[root_n] even root of a negative and the 0th root are NaN")
    assert root_n(_h(-16), 4).is_nan()
    assert root_n(_h(16), 0).is_nan()
    assert root_n(NEGATIVE_INFINITY, 4).is_nan()
    print("[root_n] zeros and infinities")
    assert root_n(ZERO, -4).is_positive_infinity()
    assert root_n(NEGATIVE_ZERO, -5).is_negative_infinity()
    assert root_n(NEGATIVE_INFINITY, 5).is_negative_infinity()
    z = root_n(NEGATIVE_INFINITY, -5)
    assert z.is_zero() and z.is_negative()


def test_hypot(close):
    print("[hypot] (3, 4) ~ 5; infinity wins over NaN")
    assert close(hypot(_h(3), _h(4)), "5", "1e-15")
    assert close(hypot(_h(-5), _h(12)), "13", "1e-15")
    assert hypot(POSITIVE_INFINITY, NAN).is_positive_infinity()
    assert hypot(NAN, NEGATIVE_INFINITY).is_positive_infinity()
    assert hypot(NAN, ONE).is_nan()


# -----------------------------
# Every digit: roots and powers are the truncation of the true value
# -----------------------------

def _triple(x):
    return (x.significand, x.exponent, x.denominator)


@pytest.mark.parametrize(
    "fn, x, expected",
    [
        (sqrt, EPSILON, (1, -16384, 1)),
        # sqrt(10)·1e-16384 = 3.16227766016837933199...e-16384
        (sqrt, HugeNumber.from_components(1, -32767), (316227766016837933, -16401, 1)),
        # sqrt(2) = 1.41421356237309504880...
        (sqrt, _h(2), (141421356237309504, -17, 1)),
        (sqrt, _h("1e100"), _triple(_h("1e50"))),
        (sqrt, _h("0.0144"), (12, -2, 1)),
        (cbrt, _h(27), (3, 0, 1)),
        (cbrt, _h(-8), (-2, 0, 1)),
        # cbrt(2) = 1.25992104989487316476...
        (cbrt, _h(2), (125992104989487316, -17, 1)),
    ],
)
def test_roots_keep_every_digit(fn, x, expected):
    print(f"[root-digits] {fn.__name__}({x}) -> expect {expected}")
    got = fn(x)
    print("got ->", _triple(got))
    assert _triple(got) == expected


def test_pow_with_root_exponents_matches_root_functions():
    print("[pow-root] (-8) ** (1/3) == -2, 2 ** 0.5 == sqrt(2), 81 ** 0.25 == 3, 8 ** (-1/3) == 0.5")
    assert _triple(pow(_h(-8), THIRD)) == (-2, 0, 1)
    assert pow(_h(2), _h("0.5")) == sqrt(_h(2))
    assert pow(_h(2), HALF) == sqrt(_h(2))
    assert _triple(pow(_h(81), _h("0.25"))) == (3, 0, 1)
    assert _triple(pow(_h(8), _h(Fraction(-1, 3)))) == (5, -1, 1)
    assert root_n(_h(-32), 5) == -2


def test_pow_integer_exponent_truncates_once():
    print("[pow-int] 3 ** 40 = 12157665459056928801 -> 121576654590569288e2; 3 ** -1 -> 0.333333333333333333")
    assert _triple(pow(_h(3), _h(40))) == (121576654590569288, 2, 1)
    assert _triple(pow(_h(3), _h(-1))) == (333333333333333333, -18, 1)
    assert pow(_h(10), _h(100)) == _h("1e100")
