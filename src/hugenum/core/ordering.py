"""
Ordering utilities: total order, magnitude comparison, Max/Min family, Clamp.

Alignment notes:
- NaN sorts as the minimum: CompareTo(NaN, NaN) == 0 and CompareTo(NaN, x) < 0
  for every other x. Equality is stricter: NaN never equals anything.
- All zeros (+0, -0, any exponent or denominator) compare equal.
- Finite non-zero values of one sign are decided by the adjusted exponent when
  it differs by two or more; otherwise the exact cross-multiplied integers
  (significand × other denominator, aligned to a common exponent) decide.
"""

from __future__ import annotations

from .exc import InvalidArgumentError
from .number import HugeNumber, _digit_count, _ten_pow


def _adjusted_exponent(x: HugeNumber) -> int:
    # Decimal order of the leading digit of significand / denominator, ±1.
    return x.exponent + _digit_count(x.significand) - _digit_count(x.denominator)


def compare_magnitude(x: HugeNumber, y: HugeNumber) -> int:
    """Compare |x| with |y| for finite values; returns -1, 0 or 1."""
    if x.is_zero() or y.is_zero():
        return (not x.is_zero()) - (not y.is_zero())
    ax, ay = _adjusted_exponent(x), _adjusted_exponent(y)
    if ax - ay >= 2:
        return 1
    if ay - ax >= 2:
        return -1
    e = min(x.exponent, y.exponent)
    lhs = abs(x.significand) * y.denominator * _ten_pow(x.exponent - e)
    rhs = abs(y.significand) * x.denominator * _ten_pow(y.exponent - e)
    return (lhs > rhs) - (lhs < rhs)


def compare_to(x: HugeNumber, y: HugeNumber) -> int:
    """Total order over HugeNumber; returns -1, 0 or 1 (NaN is the minimum)."""
    if x.is_nan():
        return 0 if y.is_nan() else -1
    if y.is_nan():
        return 1
    sx, sy = x._signum(), y._signum()
    if sx != sy:
        return -1 if sx < sy else 1
    if sx == 0:
        return 0
    xi, yi = x.is_infinity(), y.is_infinity()
    if xi or yi:
        if xi and yi:
            return 0
        return sx if xi else -sx
    c = compare_magnitude(x, y)
    return c if sx > 0 else -c


def equals(x: HugeNumber, y: HugeNumber) -> bool:
    """Value equality; NaN is never equal to anything, itself included."""
    if x.is_nan() or y.is_nan():
        return False
    return compare_to(x, y) == 0


# ----------------------------
# Max / Min family
# ----------------------------

def maximum(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Larger of two values; NaN propagates and +0 wins a tie against -0."""
    if x.is_nan():
        return x
    if y.is_nan():
        return y
    c = compare_to(x, y)
    if c > 0:
        return x
    if c < 0:
        return y
    return y if x.is_negative() else x


def minimum(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Smaller of two values; NaN propagates and -0 wins a tie against +0."""
    if x.is_nan():
        return x
    if y.is_nan():
        return y
    c = compare_to(x, y)
    if c < 0:
        return x
    if c > 0:
        return y
    return x if x.is_negative() else y


def max_number(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Like `maximum`, but a NaN operand is ignored in favour of the other."""
    if x.is_nan():
        return y
    if y.is_nan():
        return x
    return maximum(x, y)


def min_number(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Like `minimum`, but a NaN operand is ignored in favour of the other."""
    if x.is_nan():
        return y
    if y.is_nan():
        return x
    return minimum(x, y)


def _magnitude_order(x: HugeNumber, y: HugeNumber) -> int:
    xi, yi = x.is_infinity(), y.is_infinity()
    if xi or yi:
        return xi - yi
    return compare_magnitude(x, y)


def max_magnitude(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Operand with the larger absolute value; ties resolve as `maximum`."""
    if x.is_nan():
        return x
    if y.is_nan():
        return y
    c = _magnitude_order(x, y)
    if c == 0:
        return maximum(x, y)
    return x if c > 0 else y


def min_magnitude(x: HugeNumber, y: HugeNumber) -> HugeNumber:
    """Operand with the smaller absolute value; ties resolve as `minimum`."""
    if x.is_nan():
        return x
    if y.is_nan():
        return y
    c = _magnitude_order(x, y)
    if c == 0:
        return minimum(x, y)
    return x if c < 0 else y


def clamp(value: HugeNumber, lo: HugeNumber, hi: HugeNumber) -> HugeNumber:
    """Restrict `value` to [lo, hi]; NaN passes through."""
    if compare_to(lo, hi) > 0:
        raise InvalidArgumentError(f"clamp(): min {lo} is greater than max {hi}")
    if value.is_nan():
        return value
    if compare_to(value, lo) < 0:
        return lo
    if compare_to(value, hi) > 0:
        return hi
    return value


__all__ = [
    "compare_magnitude",
    "compare_to",
    "equals",
    "maximum",
    "minimum",
    "max_number",
    "min_number",
    "max_magnitude",
    "min_magnitude",
    "clamp",
]
