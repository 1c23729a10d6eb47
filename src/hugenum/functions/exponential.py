"""
Exponential functions: exp, exp2, exp10 and their "minus one" variants.

Alignment notes:
- exp(x) takes floor(x·SCALE) in the wide fixed-point domain, reduces it as
  k·ln10 + r and sums the Taylor series for e^r until a further term no longer
  changes the sum. The wide result is truncated to D digits once.
- exp2/exp10 scale the exact argument by the wide ln2/ln10 before the same
  kernel, and stay exact for integer arguments.
- expm1 subtracts the 1 in the wide domain; below 1e-20 it uses x + x²/2
  exactly, which already fills every digit.
- SERIES_ITERATION_LIMIT only guards against a representation bug; real
  evaluations stop after a few dozen terms.
- Results are always in decimal form, never an exact fraction.
"""

from __future__ import annotations

from ..core.arithmetic import multiply, subtract
from ..core.number import HugeNumber, _ten_pow
from ..core.ordering import compare_magnitude, equals
from ..core.rationals import from_fraction, to_decimal_form
from ..core.values import (
    E,
    LN2,
    LN10,
    NEGATIVE_ONE,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
)
from .fixed import (
    LN2_FIXED,
    LN10_FIXED,
    SCALE,
    exp_fixed,
    from_fixed,
    to_fixed,
)

# Debug printing control
DEBUG_EXP = False

def _dbg(msg: str) -> None:
    if DEBUG_EXP:
        print(msg)


#: Beyond ln(10^32785) every result overflows the exponent range.
_EXP_OVERFLOW = HugeNumber.from_components(75500)

#: Same bound in the fixed-point domain.
_EXP_OVERFLOW_FIXED = 75500 * SCALE

#: Integer powers of two beyond these bounds saturate / underflow outright.
_EXP2_LIMIT = 110_000

#: Below this magnitude expm1 is x + x²/2 to every representable digit.
_EXPM1_SERIES_BOUND = HugeNumber.from_components(1, -20)


def _exp_scaled(x: int) -> HugeNumber:
    """e^(x / SCALE), saturating outside the exponent range."""
    if x > _EXP_OVERFLOW_FIXED:
        return POSITIVE_INFINITY
    if x < -_EXP_OVERFLOW_FIXED:
        return ZERO
    v, k = exp_fixed(x)
    _dbg(f"exp: e^({x}/SCALE) = {v}/SCALE * 10^{k}")
    return from_fixed(v, k)


def exp(x: HugeNumber) -> HugeNumber:
    """e raised to x."""
    if x.is_nan() or x.is_positive_infinity():
        return x
    if x.is_negative_infinity():
        return ZERO
    if x.is_zero():
        return ONE
    if equals(x, ONE):
        return E
    if compare_magnitude(x, _EXP_OVERFLOW) > 0:
        return ZERO if x.is_negative() else POSITIVE_INFINITY
    return _exp_scaled(to_fixed(x))


def exp2(x: HugeNumber) -> HugeNumber:
    """2 raised to x; exact for integer x."""
    if x.is_nan() or x.is_positive_infinity():
        return x
    if x.is_negative_infinity():
        return ZERO
    if x.is_integer():
        n = int(x)
        if n > _EXP2_LIMIT:
            return POSITIVE_INFINITY
        if n < -_EXP2_LIMIT:
            return ZERO
        if n >= 0:
            return HugeNumber.from_components(2 ** n)
        # 2^-n == 5^n × 10^-n exactly
        return HugeNumber.from_components(5 ** -n, n)
    if compare_magnitude(x, HugeNumber.from_components(_EXP2_LIMIT)) > 0:
        return ZERO if x.is_negative() else POSITIVE_INFINITY
    q = x.to_fraction()
    return _exp_scaled((q.numerator * LN2_FIXED) // q.denominator)


def exp10(x: HugeNumber) -> HugeNumber:
    """10 raised to x; exact for integer x."""
    if x.is_nan() or x.is_positive_infinity():
        return x
    if x.is_negative_infinity():
        return ZERO
    if x.is_integer():
        # Normalisation saturates / underflows out-of-range exponents.
        return HugeNumber.from_components(1, int(x))
    if compare_magnitude(x, HugeNumber.from_components(_EXP2_LIMIT)) > 0:
        return ZERO if x.is_negative() else POSITIVE_INFINITY
    q = x.to_fraction()
    return _exp_scaled((q.numerator * LN10_FIXED) // q.denominator)


def _expm1_scaled(x: int) -> HugeNumber:
    """e^(x / SCALE) - 1 with the subtraction done before truncation."""
    if x > _EXP_OVERFLOW_FIXED:
        return POSITIVE_INFINITY
    if x < -_EXP_OVERFLOW_FIXED:
        return NEGATIVE_ONE
    v, k = exp_fixed(x)
    if k >= 0:
        return from_fixed(v * _ten_pow(k) - SCALE)
    return from_fixed(v - SCALE * _ten_pow(-k), k)


def expm1(x: HugeNumber) -> HugeNumber:
    """exp(x) - 1, accurate for small |x|."""
    if x.is_nan() or x.is_positive_infinity() or x.is_zero():
        return x
    if x.is_negative_infinity():
        return NEGATIVE_ONE
    if compare_magnitude(x, _EXPM1_SERIES_BOUND) < 0:
        q = x.to_fraction()
        return to_decimal_form(from_fraction(q + q * q / 2))
    if compare_magnitude(x, _EXP_OVERFLOW) > 0:
        return NEGATIVE_ONE if x.is_negative() else POSITIVE_INFINITY
    return _expm1_scaled(to_fixed(x))


def exp2m1(x: HugeNumber) -> HugeNumber:
    """2^x - 1."""
    if x.is_integer() or not x.is_finite():
        return subtract(exp2(x), ONE)
    if compare_magnitude(x, _EXPM1_SERIES_BOUND) < 0:
        return expm1(multiply(x, LN2))
    if compare_magnitude(x, HugeNumber.from_components(_EXP2_LIMIT)) > 0:
        return NEGATIVE_ONE if x.is_negative() else POSITIVE_INFINITY
    q = x.to_fraction()
    return _expm1_scaled((q.numerator * LN2_FIXED) // q.denominator)


def exp10m1(x: HugeNumber) -> HugeNumber:
    """10^x - 1."""
    if x.is_integer() or not x.is_finite():
        return subtract(exp10(x), ONE)
    if compare_magnitude(x, _EXPM1_SERIES_BOUND) < 0:
        return expm1(multiply(x, LN10))
    if compare_magnitude(x, HugeNumber.from_components(_EXP2_LIMIT)) > 0:
        return NEGATIVE_ONE if x.is_negative() else POSITIVE_INFINITY
    q = x.to_fraction()
    return _expm1_scaled((q.numerator * LN10_FIXED) // q.denominator)


__all__ = [
    "exp",
    "exp2",
    "exp10",
    "expm1",
    "exp2m1",
    "exp10m1",
]
