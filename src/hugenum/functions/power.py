"""
Power and root functions: pow, sqrt, cbrt, root_n, hypot.

Alignment notes:
- pow is exhaustively special-cased (NaN, zero, one, infinities, negative
  bases) first. A negative base is only defined for exponents whose exact
  fraction has an odd denominator (integers included); the sign then follows
  the parity of the numerator.
- Integer exponents up to INTEGER_POWER_LIMIT are raised on the exact
  significand and denominator; exponents 1/n go to the n-th root. Every other
  exponent reduces to exp(y·log(x)) in the wide fixed-point domain.
- Roots shift x by a multiple of n decades so the integer radicand carries
  n·_ROOT_DIGITS digits. exp(log(x)/n) seeds Newton's method on integers,
  which stops on the exact floor of the root; truncation to D digits is the
  only rounding, so perfect powers come out exact.
- No result is ever an exact fraction: everything leaves in decimal form.
"""

from __future__ import annotations

from ..core.arithmetic import add, copy_sign, invert, multiply, negate
from ..core.constants import SIGNIFICAND_DIGITS
from ..core.number import HugeNumber, _collapse, _digit_count, _ten_pow
from ..core.ordering import compare_magnitude, equals
from ..core.rationals import to_decimal_form
from ..core.values import (
    HALF,
    NAN,
    NEGATIVE_INFINITY,
    NEGATIVE_ONE,
    NEGATIVE_ZERO,
    ONE,
    POSITIVE_INFINITY,
    THIRD,
    ZERO,
)
from .exponential import _exp_scaled, exp
from .fixed import log_fixed
from .logarithmic import log

# Debug printing control
DEBUG_POWER = False

def _dbg(msg: str) -> None:
    if DEBUG_POWER:
        print(msg)


#: Integer exponents (and root degrees reached from pow) up to this magnitude
#: are evaluated exactly before the final truncation.
INTEGER_POWER_LIMIT = 64

#: Digits of the integer root before truncation to D.
_ROOT_DIGITS = SIGNIFICAND_DIGITS + 6


def _exact_power(x: HugeNumber, n: int) -> HugeNumber:
    """x^n for a positive finite x and a non-zero integer n, truncated once."""
    m, e, d = x.significand, x.exponent, x.denominator
    if n < 0:
        m, d, e, n = d, m, -e, -n
    significand, exponent = _collapse(m ** n, e * n, d ** n)
    return HugeNumber.from_components(significand, exponent)


# ----------------------------
# Integer roots
# ----------------------------

def _integer_root(radicand: int, n: int, seed: int) -> int:
    """floor(radicand^(1/n)) by Newton's method on integers."""
    y = max(seed, 1)
    # From any positive start one step lands on or above the floor of the root.
    y = ((n - 1) * y + radicand // y ** (n - 1)) // n
    steps = 1
    while True:
        following = ((n - 1) * y + radicand // y ** (n - 1)) // n
        if following >= y:
            _dbg(f"root: degree {n} settled after {steps} Newton steps")
            return y
        y = following
        steps += 1


def _root_estimate(radicand: int, n: int) -> int:
    z = HugeNumber.from_components(radicand)
    if n == 2:
        k = HALF
    elif n == 3:
        k = THIRD
    else:
        k = invert(HugeNumber.from_components(n))
    estimate = exp(multiply(k, log(z)))
    if not estimate.is_finite():
        # Radicand beyond the exponent range: a power of two above the root.
        return 1 << -(-radicand.bit_length() // n)
    return int(estimate)


def _root(m: int, e: int, d: int, n: int) -> HugeNumber:
    """n-th root of the positive value (m / d)·10^e, truncated to D digits."""
    if n < 0:
        m, d, e, n = d, m, -e, -n
    # Smallest g with at least n·_ROOT_DIGITS digits in m·10^(e + n·g) / d.
    g = -((_digit_count(m) - _digit_count(d) + e - n * _ROOT_DIGITS) // n)
    radicand = (m * _ten_pow(e + n * g)) // d
    root = _integer_root(radicand, n, _root_estimate(radicand, n))
    return HugeNumber.from_components(root, -g)


def _positive_root(x: HugeNumber, n: int) -> HugeNumber:
    return _root(x.significand, x.exponent, x.denominator, n)


# ----------------------------
# Power
# ----------------------------

def pow(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """x raised to y (NaN when the real result does not exist)."""
    if x.is_nan() or y.is_nan():
        return NAN
    if y.is_zero():
        return ONE
    if x.is_zero():
        return POSITIVE_INFINITY if y.is_negative() else ZERO
    if equals(x, ONE):
        return ONE
    if equals(y, ONE):
        return to_decimal_form(x)
    if x.is_positive_infinity():
        return ZERO if y.is_negative() else x

    if y.is_infinity():
        if equals(x, NEGATIVE_ONE):
            return NAN
        grows = (x.is_infinity() or compare_magnitude(x, ONE) > 0) == y.is_positive_infinity()
        return POSITIVE_INFINITY if grows else ZERO

    if x.is_negative_infinity():
        odd = y.is_odd_integer()
        if y.is_negative():
            return NEGATIVE_ZERO if odd else ZERO
        return NEGATIVE_INFINITY if odd else POSITIVE_INFINITY

    q = y.to_fraction()
    if x.is_negative():
        if q.denominator % 2 == 0:
            _dbg(f"pow: negative base {x} with exponent {y} has no real result")
            return NAN
        result = pow(negate(x), y)
        return negate(result) if q.numerator % 2 else result

    if q.denominator == 1 and abs(q.numerator) <= INTEGER_POWER_LIMIT:
        return _exact_power(x, q.numerator)
    if abs(q.numerator) == 1 and q.denominator <= INTEGER_POWER_LIMIT:
        _dbg(f"pow: exponent {q} -> root of degree {q.denominator}")
        return _positive_root(x, q.numerator * q.denominator)

    scaled = (log_fixed(x.to_fraction()) * q.numerator) // q.denominator
    return _exp_scaled(scaled)


# ----------------------------
# Roots
# ----------------------------

def sqrt(x: HugeNumber) -> HugeNumber:
    """Square root (NaN for negative x; signed zeros are returned unchanged)."""
    if x.is_nan() or x.is_zero():
        return x
    if x.is_negative():
        return NAN
    if x.is_positive_infinity() or equals(x, ONE):
        return x
    return _positive_root(x, 2)


def cbrt(x: HugeNumber) -> HugeNumber:
    """Cube root, defined for every real x."""
    if x.is_nan() or x.is_zero() or x.is_infinity():
        return x
    if x.is_negative():
        return negate(cbrt(negate(x)))
    if equals(x, ONE):
        return x
    return _positive_root(x, 3)


def root_n(x: HugeNumber, n: int) -> HugeNumber:
    """Real n-th root of x (NaN for n == 0 and for even roots of negatives)."""
    if n == 0 or x.is_nan():
        return NAN
    if n == 2:
        return sqrt(x)
    if n == 3:
        return cbrt(x)
    odd = n % 2 == 1
    if x.is_zero():
        if n > 0:
            return copy_sign(ZERO, x) if odd else ZERO
        return copy_sign(POSITIVE_INFINITY, x) if odd else POSITIVE_INFINITY
    if x.is_positive_infinity():
        return x if n > 0 else ZERO
    if x.is_negative_infinity():
        if not odd:
            return NAN
        return x if n > 0 else NEGATIVE_ZERO
    if x.is_negative() and not odd:
        return NAN
    if equals(x, ONE) or n == 1:
        return to_decimal_form(x)
    if n == -1:
        return to_decimal_form(invert(x))
    result = _positive_root(negate(x) if x.is_negative() else x, n)
    return copy_sign(result, x)


def hypot(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """sqrt(x² + y²); infinite if either side is infinite, even against NaN."""
    if x.is_infinity() or y.is_infinity():
        return POSITIVE_INFINITY
    if x.is_nan() or y.is_nan():
        return NAN
    return sqrt(add(multiply(x, x), multiply(y, y)))


__all__ = [
    "INTEGER_POWER_LIMIT",
    "pow",
    "sqrt",
    "cbrt",
    "root_n",
    "hypot",
]
