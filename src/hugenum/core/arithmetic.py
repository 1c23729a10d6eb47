"""
Arithmetic engine: Add, Subtract, Multiply, Divide, Modulo, FMA, Negate, Invert.

Every operation is integer domain and returns a normalised HugeNumber. Sentinels
are resolved before any digit is touched: NaN is sticky, overflow saturates to
signed infinity, underflow to signed zero. Nothing here raises for undefined or
overflowing results.

# Alignment notes:
# - Add picks the operand of larger *magnitude*. The larger significand is
#   widened into its unused digit budget; when every digit of the smaller
#   operand still lies below the larger's last representable place the larger
#   is returned unchanged (precision-loss short-circuit). Otherwise the aligned
#   significands are summed exactly and truncated once by normalisation.
# - Rational operands are put over the LCM of their denominators; when that is
#   out of range, or either side is a non-integral decimal, both collapse. The
#   short-circuit test runs first, on the decimal forms, and hands back the
#   original fraction.
# - Multiply/Divide keep exact fractions while the reduced denominator fits the
#   16-bit range and the numerator fits D digits; otherwise they fall back to an
#   exact wide integer product/quotient truncated to D digits.
# - FMA forms the double-width product exactly and feeds it straight into the
#   Add alignment, so only one truncation happens.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Tuple

from .constants import (
    SIGNIFICAND_DIGITS,
    MAX_SIGNIFICAND,
    MAX_EXPONENT,
    DENOMINATOR_MAX,
)
from .number import HugeNumber, _digit_count, _ten_pow
from .ordering import compare_magnitude
from .rationals import from_fraction, lcm, to_decimal_form, to_denominator
from .values import (
    NAN,
    ZERO,
    NEGATIVE_ZERO,
    ONE,
    NEGATIVE_ONE,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
)

# Debug printing control
DEBUG_ARITHMETIC = False

def _dbg(msg: str) -> None:
    if DEBUG_ARITHMETIC:
        print(msg)


def _infinity(negative: bool) -> HugeNumber:
    return NEGATIVE_INFINITY if negative else POSITIVE_INFINITY


def _zero(negative: bool) -> HugeNumber:
    return NEGATIVE_ZERO if negative else ZERO


def _is_decimal_fraction(x: HugeNumber) -> bool:
    # Non-integral decimal: cannot take part in exact fraction arithmetic.
    return x.denominator == 1 and x.exponent < 0


# ----------------------------
# Sign operations
# ----------------------------

def negate(x: HugeNumber) -> HugeNumber:
    """Flip the sign; zero maps to negative zero and back, NaN is unchanged."""
    if x.is_nan():
        return x
    if x.is_positive_infinity():
        return NEGATIVE_INFINITY
    if x.is_negative_infinity():
        return POSITIVE_INFINITY
    if x.is_zero():
        return ZERO if x.is_negative() else NEGATIVE_ZERO
    return HugeNumber(-x.significand, x.exponent, x.denominator)


def absolute(x: HugeNumber) -> HugeNumber:
    if x.is_negative():
        return negate(x)
    return x


def copy_sign(x: HugeNumber, sign: HugeNumber) -> HugeNumber:
    """Magnitude of `x` with the sign of `sign` (NaN `x` stays NaN)."""
    if x.is_nan():
        return x
    if x.is_negative() == sign.is_negative():
        return x
    return negate(x)


def sign(x: HugeNumber) -> HugeNumber:
    """-1, 0 or 1 as a HugeNumber (NaN for NaN)."""
    if x.is_nan():
        return NAN
    if x.is_zero():
        return ZERO
    return NEGATIVE_ONE if x.significand < 0 else ONE


# ----------------------------
# Addition / subtraction
# ----------------------------

def _add_aligned(lm: int, le: int, sm: int, se: int, d: int) -> HugeNumber:
    """Sum (lm/d)·10^le and (sm/d)·10^se where |lm·10^le| >= |sm·10^se|.

    Significands may be wider than D digits (FMA feeds a double-width product).
    """
    l_digits = _digit_count(lm)
    s_digits = _digit_count(sm)
    # Widen the larger operand into its unused digit budget, but not past the smaller's exponent.
    room = max(0, SIGNIFICAND_DIGITS - l_digits)
    floor_place = le - room
    if se + s_digits - 1 < floor_place:
        _dbg(f"add: smaller (m={sm}, e={se}) below precision of larger (m={lm}, e={le}) -> short-circuit")
        return HugeNumber.from_components(lm, le, d)
    e = min(le, se)
    total = lm * _ten_pow(le - e) + sm * _ten_pow(se - e)
    _dbg(f"add: aligned at e={e}: {lm}@{le} + {sm}@{se} = {total}")
    return HugeNumber.from_components(total, e, d)


def _below_last_place(larger: HugeNumber, smaller: HugeNumber) -> bool:
    # Measured on the decimal forms; the operands themselves are left untouched.
    ld, sd = to_decimal_form(larger), to_decimal_form(smaller)
    if sd.is_zero():
        return True
    room = max(0, SIGNIFICAND_DIGITS - _digit_count(ld.significand))
    return sd.exponent + _digit_count(sd.significand) - 1 < ld.exponent - room


def add(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    if x.is_nan() or y.is_nan():
        return NAN
    if x.is_infinity():
        if y.is_infinity() and x.significand != y.significand:
            # Opposite-signed infinities cancel to zero.
            return ZERO
        return x
    if y.is_infinity():
        return y
    if x.is_zero() and y.is_zero():
        return NEGATIVE_ZERO if (x.is_negative() and y.is_negative()) else ZERO
    if y.is_zero():
        return x
    if x.is_zero():
        return y

    if compare_magnitude(x, y) >= 0:
        larger, smaller = x, y
    else:
        larger, smaller = y, x

    if larger.denominator > 1 or smaller.denominator > 1:
        if _below_last_place(larger, smaller):
            _dbg(f"add: {smaller} below last place of fraction {larger} -> unchanged")
            return larger
        if _is_decimal_fraction(larger) or _is_decimal_fraction(smaller):
            larger, smaller = to_decimal_form(larger), to_decimal_form(smaller)
        else:
            common = lcm(larger.denominator, smaller.denominator)
            larger = to_denominator(larger, common or 1)
            smaller = to_denominator(smaller, common or 1)
            if larger.denominator != smaller.denominator:
                _dbg("add: no common denominator -> collapse both")
                larger, smaller = to_decimal_form(larger), to_decimal_form(smaller)

    # The true sum lies beyond MAX_VALUE / MIN_VALUE: not representable.
    if (
        abs(larger.significand) == MAX_SIGNIFICAND
        and larger.exponent == MAX_EXPONENT
        and larger.denominator == 1
        and (larger.significand > 0) == (smaller.significand > 0)
    ):
        return _infinity(larger.significand < 0)

    return _add_aligned(
        larger.significand, larger.exponent,
        smaller.significand, smaller.exponent,
        larger.denominator,
    )


def subtract(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    return add(x, negate(y))


# ----------------------------
# Multiplication / division
# ----------------------------

def multiply(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    if x.is_nan() or y.is_nan():
        return NAN
    negative = x.is_negative() != y.is_negative()
    if x.is_zero() or y.is_zero():
        return _zero(negative)
    if x.is_infinity() or y.is_infinity():
        return _infinity(negative)

    if not _is_decimal_fraction(x) and not _is_decimal_fraction(y):
        num = x.significand * y.significand
        den = x.denominator * y.denominator
        q = Fraction(num, den)
        if q.denominator <= DENOMINATOR_MAX and abs(q.numerator) <= MAX_SIGNIFICAND:
            return HugeNumber.from_components(q.numerator, x.exponent + y.exponent, q.denominator)
        _dbg(f"multiply: fraction {num}/{den} out of range -> decimal")

    x, y = to_decimal_form(x), to_decimal_form(y)
    return HugeNumber.from_components(x.significand * y.significand, x.exponent + y.exponent)


def divide(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    if x.is_nan() or y.is_nan():
        return NAN
    negative = x.is_negative() != y.is_negative()
    if y.is_zero():
        if x.is_zero():
            return NAN
        return _infinity(negative)
    if x.is_infinity():
        if y.is_infinity():
            return NAN
        return _infinity(negative)
    if x.is_zero() or y.is_infinity():
        return _zero(negative)

    if not _is_decimal_fraction(x) and not _is_decimal_fraction(y):
        num = x.significand * y.denominator
        den = x.denominator * abs(y.significand)
        q = Fraction(num, den)
        if q.denominator <= DENOMINATOR_MAX and abs(q.numerator) <= MAX_SIGNIFICAND:
            n = -q.numerator if y.significand < 0 else q.numerator
            return HugeNumber.from_components(n, x.exponent - y.exponent, q.denominator)
        _dbg(f"divide: fraction {num}/{den} out of range -> decimal")

    x, y = to_decimal_form(x), to_decimal_form(y)
    k = SIGNIFICAND_DIGITS + _digit_count(y.significand) + 1
    q = (abs(x.significand) * _ten_pow(k)) // abs(y.significand)
    return HugeNumber.from_components(-q if negative else q, x.exponent - y.exponent - k)


def invert(x: HugeNumber) -> HugeNumber:
    """Reciprocal 1/x; exact for small integral significands and fractions."""
    if x.is_nan():
        return x
    if x.is_positive_infinity():
        return ZERO
    if x.is_negative_infinity():
        return NEGATIVE_ZERO
    if x.is_zero():
        return NAN
    m = x.significand
    if abs(m) <= DENOMINATOR_MAX and (x.denominator > 1 or x.exponent >= 0):
        n = -x.denominator if m < 0 else x.denominator
        return HugeNumber.from_components(n, -x.exponent, abs(m))
    return divide(ONE, x)


def square(x: HugeNumber) -> HugeNumber:
    return multiply(x, x)


def cube(x: HugeNumber) -> HugeNumber:
    return multiply(multiply(x, x), x)


# ----------------------------
# Fused multiply-add
# ----------------------------

def fused_multiply_add(x: HugeNumber, y: HugeNumber, z: HugeNumber) -> HugeNumber:
    """(x * y) + z with a single final truncation.

    The product is kept at full double width (up to 2·D digits) and aligned
    against `z` directly, so FMA can differ from `add(multiply(x, y), z)`.
    """
    if x.is_nan() or y.is_nan() or z.is_nan():
        return NAN
    if x.is_zero() or y.is_zero():
        return z
    if x.is_infinity() or y.is_infinity():
        negative = x.is_negative() != y.is_negative()
        if z.is_infinity() and z.is_negative() != negative:
            return ZERO
        return _infinity(negative)
    if z.is_infinity():
        return z

    if not _is_decimal_fraction(x) and not _is_decimal_fraction(y):
        q = Fraction(x.significand * y.significand, x.denominator * y.denominator)
        if q.denominator <= DENOMINATOR_MAX and abs(q.numerator) <= MAX_SIGNIFICAND:
            product = HugeNumber.from_components(q.numerator, x.exponent + y.exponent, q.denominator)
            return add(product, z)

    x, y, z = to_decimal_form(x), to_decimal_form(y), to_decimal_form(z)
    pm = x.significand * y.significand
    pe = x.exponent + y.exponent
    _dbg(f"fma: wide product m={pm}, e={pe}")
    if z.is_zero():
        return HugeNumber.from_components(pm, pe)

    # Magnitude order of the wide product against z, by leading digit place.
    p_top = pe + _digit_count(pm)
    z_top = z.exponent + _digit_count(z.significand)
    if p_top == z_top:
        e = min(pe, z.exponent)
        p_larger = abs(pm) * _ten_pow(pe - e) >= abs(z.significand) * _ten_pow(z.exponent - e)
    else:
        p_larger = p_top > z_top
    if p_larger:
        return _add_aligned(pm, pe, z.significand, z.exponent, 1)
    return _add_aligned(z.significand, z.exponent, pm, pe, 1)


# ----------------------------
# Modulo / DivRem (truncated division)
# ----------------------------

def modulo(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Remainder of truncated division: x - y·trunc(x / y), sign of the dividend.

    Sentinels follow `math.fmod`: x mod 0 and inf mod y are NaN, x mod inf is x.
    """
    if x.is_nan() or y.is_nan():
        return NAN
    if y.is_zero() or x.is_infinity():
        return NAN
    if y.is_infinity() or x.is_zero():
        return x
    a, b = x.to_fraction(), y.to_fraction()
    n = abs(a) // abs(b)
    r = abs(a) - n * abs(b)
    if r == 0:
        return _zero(x.is_negative())
    return from_fraction(-r if a < 0 else r)


def div_rem(x: HugeNumber, y: HugeNumber) -> Tuple[HugeNumber, HugeNumber]:
    """(trunc(x / y), x mod y)."""
    q = divide(x, y)
    if q.is_finite() and x.is_finite() and y.is_finite():
        # Exact integer quotient (a rounded quotient could cross an integer boundary).
        negative = x.is_negative() != y.is_negative()
        n = abs(x.to_fraction()) // abs(y.to_fraction())
        q = HugeNumber.from_components(-n if negative else n) if n else _zero(negative)
    return q, modulo(x, y)


__all__ = [
    "negate",
    "absolute",
    "copy_sign",
    "sign",
    "add",
    "subtract",
    "multiply",
    "divide",
    "invert",
    "square",
    "cube",
    "fused_multiply_add",
    "modulo",
    "div_rem",
]
