"""
Rational reduction: GCD/LCM, re-expression over a new denominator, and the
fraction-to-decimal collapse.

None of these fail: whenever a fraction cannot be kept exactly within the
16-bit denominator range, the value falls back to decimal form (denominator 1).

# Alignment notes:
# - The collapse scales the significand by 10^(D + digits(denominator)) before
#   the integer division so the quotient always keeps at least D + 1 digits;
#   normalisation then truncates it to D digits.
# - ToDenominator deliberately returns an *unreduced* fraction (it exists to put
#   two operands over one denominator); ReduceFraction undoes that afterwards.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Optional

from .constants import MAX_SIGNIFICAND, DENOMINATOR_MAX
from .number import HugeNumber, _collapse, _ten_pow
from .values import NAN, POSITIVE_INFINITY, NEGATIVE_INFINITY

# Debug printing control
DEBUG_RATIONALS = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONALS:
        print(msg)


def gcd(a: int, b: int) -> int:
    """Greatest common factor of |a| and |b| (gcd(0, 0) == 0)."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> Optional[int]:
    """Least common multiple of two denominators, or None beyond DENOMINATOR_MAX."""
    if a == 0 or b == 0:
        return 0
    result = abs(a) // math.gcd(a, b) * abs(b)
    if result > DENOMINATOR_MAX:
        _dbg(f"lcm: {a}, {b} -> {result} exceeds denominator range")
        return None
    return result


def reduce_fraction(value: HugeNumber) -> HugeNumber:
    """Divide significand and denominator by their GCD."""
    if value.denominator == 1 or not value.is_finite():
        return value
    g = math.gcd(value.significand, value.denominator)
    if g <= 1:
        return value
    return HugeNumber.from_components(value.significand // g, value.exponent, value.denominator // g)


def to_decimal_form(value: HugeNumber) -> HugeNumber:
    """Collapse a fraction to its truncated 18-digit decimal approximation."""
    if value.denominator == 1 or not value.is_finite():
        return value
    m, e = _collapse(value.significand, value.exponent, value.denominator)
    return HugeNumber.from_components(m, e)


def to_denominator(value: HugeNumber, denominator: int) -> HugeNumber:
    """Re-express `value` over `denominator`, collapsing to decimal when that is impossible.

    - Sentinels and non-rational decimals (denominator 1, exponent != 0) are returned unchanged
    - Target 0 yields NaN for zero, signed infinity otherwise
    - Target 1 collapses to decimal form
    - A smaller target must divide both the current denominator and the significand exactly
    - A larger target must be a multiple of the current denominator without significand overflow
    """
    if value.denominator == denominator:
        return value
    if not value.is_finite() or value.is_not_rational():
        return value
    if denominator == 0:
        if value.is_zero():
            return NAN
        return NEGATIVE_INFINITY if value.is_negative() else POSITIVE_INFINITY
    if denominator == 1:
        return to_decimal_form(value)

    m, d = value.significand, value.denominator
    if denominator < d:
        if d % denominator != 0:
            return to_decimal_form(value)
        divisor = d // denominator
        if m % divisor != 0:
            return to_decimal_form(value)
        return HugeNumber(m // divisor, value.exponent, denominator)

    if denominator % d != 0:
        return to_decimal_form(value)
    factor = denominator // d
    if abs(m) * factor > MAX_SIGNIFICAND:
        _dbg(f"to_denominator: significand overflow m={m}, factor={factor} -> collapse")
        return to_decimal_form(value)
    return HugeNumber(m * factor, value.exponent, denominator)


def from_fraction(q: Fraction) -> HugeNumber:
    """Build a HugeNumber from an exact Fraction, keeping it exact where possible.

    Powers of two and five in the denominator become a decimal exponent; the
    remaining factor stays as the denominator when it fits the 16-bit range,
    otherwise the value collapses to 18 digits.
    """
    n, d = q.numerator, q.denominator
    if n == 0:
        return HugeNumber(0, 0, 1)
    twos = fives = 0
    while d % 2 == 0:
        d //= 2
        twos += 1
    while d % 5 == 0:
        d //= 5
        fives += 1
    k = max(twos, fives)
    n *= _ten_pow(k) // (2 ** twos * 5 ** fives)
    return HugeNumber.from_components(n, -k, d)


__all__ = [
    "gcd",
    "lcm",
    "reduce_fraction",
    "to_decimal_form",
    "to_denominator",
    "from_fraction",
]
