"""
Logarithms: natural log, arbitrary base, log2, log10 and the "plus one" forms.

Alignment notes:
- The exact input (fractions included) goes to the wide fixed-point kernel,
  which splits it as 10^k · 2^j · w with w in [0.75, 1.5) and sums
  ln w = 2·atanh((w - 1)/(w + 1)) until a term floors to zero.
- log2, log10 and log_base divide the wide logarithms before the single
  truncation to D digits.
- logp1 takes the logarithm of the exact 1 + x; below 1e-20 it uses
  x - x²/2, which already fills every digit.
- Exact powers of ten (log10) and of two (log2) return exact integers.
"""

from __future__ import annotations

from ..core.arithmetic import divide
from ..core.number import HugeNumber, _ten_pow
from ..core.ordering import compare_magnitude, compare_to, equals
from ..core.rationals import from_fraction, to_decimal_form
from ..core.values import (
    LN2,
    LN10,
    NAN,
    NEGATIVE_INFINITY,
    NEGATIVE_ONE,
    ONE,
    ZERO,
)
from .fixed import (
    LN2_FIXED,
    LN10_FIXED,
    div_fixed,
    from_fixed,
    log_fixed,
)

# Debug printing control
DEBUG_LOG = False

def _dbg(msg: str) -> None:
    if DEBUG_LOG:
        print(msg)


#: Below this magnitude logp1 is x - x²/2 to every representable digit.
_LOGP1_SERIES_BOUND = HugeNumber.from_components(1, -20)


def log(x: HugeNumber) -> HugeNumber:
    """Natural logarithm (NaN for negative x, -Infinity for zero)."""
    if x.is_nan():
        return x
    if x.is_zero():
        return NEGATIVE_INFINITY
    if x.is_negative():
        return NAN
    if x.is_positive_infinity():
        return x
    if equals(x, ONE):
        return ZERO
    result = log_fixed(x.to_fraction())
    _dbg(f"log: ln({x}) = {result}/SCALE")
    return from_fixed(result)


def log_base(x: HugeNumber, base: HugeNumber) -> HugeNumber:
    """Logarithm of x in an arbitrary base."""
    if x.is_nan() or base.is_nan() or equals(base, ONE) or (x.is_negative() and not x.is_zero()):
        return NAN
    if not equals(x, ONE) and (base.is_zero() or base.is_infinity()):
        return NAN
    if x.is_zero() or x.is_infinity() or base.is_negative():
        return to_decimal_form(divide(log(x), log(base)))
    if equals(x, ONE):
        return ZERO
    lx, lb = log_fixed(x.to_fraction()), log_fixed(base.to_fraction())
    return from_fixed(div_fixed(lx, lb))


def log2(x: HugeNumber) -> HugeNumber:
    if x.is_integer() and x.significand > 0:
        v = x.significand * _ten_pow(x.exponent)
        if v & (v - 1) == 0:
            return HugeNumber.from_components(v.bit_length() - 1)
    if not x.is_finite() or not x.is_positive():
        return to_decimal_form(divide(log(x), LN2))
    return from_fixed(div_fixed(log_fixed(x.to_fraction()), LN2_FIXED))


def log10(x: HugeNumber) -> HugeNumber:
    if x.is_finite() and x.denominator == 1 and x.significand > 0:
        digits = x.digit_count
        if x.significand == _ten_pow(digits - 1):
            return HugeNumber.from_components(x.exponent + digits - 1)
    if not x.is_finite() or not x.is_positive():
        return to_decimal_form(divide(log(x), LN10))
    return from_fixed(div_fixed(log_fixed(x.to_fraction()), LN10_FIXED))


def _logp1_fixed(x: HugeNumber) -> int:
    return log_fixed(x.to_fraction() + 1)


def _logp1_sentinel(x: HugeNumber):
    """Result for arguments the wide kernel does not take, else None."""
    if x.is_nan() or x.is_positive_infinity() or x.is_zero():
        return x
    c = compare_to(x, NEGATIVE_ONE)
    if c < 0:
        return NAN
    if c == 0:
        return NEGATIVE_INFINITY
    return None


def logp1(x: HugeNumber) -> HugeNumber:
    """ln(1 + x), accurate for small |x|."""
    special = _logp1_sentinel(x)
    if special is not None:
        return special
    if compare_magnitude(x, _LOGP1_SERIES_BOUND) < 0:
        q = x.to_fraction()
        return to_decimal_form(from_fraction(q - q * q / 2))
    return from_fixed(_logp1_fixed(x))


def log2p1(x: HugeNumber) -> HugeNumber:
    special = _logp1_sentinel(x)
    if special is not None:
        return special
    if compare_magnitude(x, _LOGP1_SERIES_BOUND) < 0:
        return to_decimal_form(divide(logp1(x), LN2))
    return from_fixed(div_fixed(_logp1_fixed(x), LN2_FIXED))


def log10p1(x: HugeNumber) -> HugeNumber:
    special = _logp1_sentinel(x)
    if special is not None:
        return special
    if compare_magnitude(x, _LOGP1_SERIES_BOUND) < 0:
        return to_decimal_form(divide(logp1(x), LN10))
    return from_fixed(div_fixed(_logp1_fixed(x), LN10_FIXED))


__all__ = [
    "log",
    "log_base",
    "log2",
    "log10",
    "logp1",
    "log2p1",
    "log10p1",
]
