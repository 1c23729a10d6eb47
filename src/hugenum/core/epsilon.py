"""
Epsilon/ULP utilities: the smallest step that still changes a value, and the
increment/decrement operations built on it.

The epsilon of a finite value is the place value of its last representable
digit: 10^(exponent - (D - digit_count)). The more of the D digit slots a
significand already uses, the coarser its epsilon.
"""

from __future__ import annotations

from .arithmetic import absolute, add, subtract
from .constants import SIGNIFICAND_DIGITS, MIN_EXPONENT
from .number import HugeNumber
from .ordering import compare_to, equals, maximum
from .rationals import to_decimal_form
from .values import (
    NAN,
    ONE,
    ZERO,
    EPSILON,
    NEARLY_ZERO,
    MAX_VALUE,
    MIN_VALUE,
    POSITIVE_INFINITY,
)


def get_epsilon(value: HugeNumber) -> HugeNumber:
    """Place value of the last digit slot (EPSILON for zero, +inf for infinities).

    A fraction is measured on its decimal form, so 1/3 has the epsilon of
    0.333333333333333333. Adding the result to `value` always changes it.
    """
    if value.is_nan():
        return NAN
    if value.is_zero():
        return EPSILON
    if value.is_infinity():
        return POSITIVE_INFINITY
    if value.denominator > 1:
        value = to_decimal_form(value)
        if value.is_zero():
            return EPSILON
    exponent = value.exponent - (SIGNIFICAND_DIGITS - value.digit_count)
    return HugeNumber.from_components(1, max(exponent, MIN_EXPONENT))


def increment(value: HugeNumber) -> HugeNumber:
    """value + max(1, epsilon): at least one away and always distinguishable."""
    if value.is_nan() or value.is_positive_infinity():
        return value
    if value.is_negative_infinity():
        return MIN_VALUE
    return add(value, maximum(ONE, get_epsilon(value)))


def decrement(value: HugeNumber) -> HugeNumber:
    """value - max(1, epsilon)."""
    if value.is_nan() or value.is_negative_infinity():
        return value
    if value.is_positive_infinity():
        return MAX_VALUE
    return subtract(value, maximum(ONE, get_epsilon(value)))


def bit_increment(value: HugeNumber) -> HugeNumber:
    """Next representable value toward +infinity (value + epsilon)."""
    if value.is_nan() or value.is_positive_infinity():
        return value
    if value.is_negative_infinity():
        return MIN_VALUE
    return add(value, get_epsilon(value))


def bit_decrement(value: HugeNumber) -> HugeNumber:
    """Next representable value toward -infinity (value - epsilon)."""
    if value.is_nan() or value.is_negative_infinity():
        return value
    if value.is_positive_infinity():
        return MAX_VALUE
    return subtract(value, get_epsilon(value))


# ----------------------------
# Tolerance checks
# ----------------------------

def is_nearly_equal(x: HugeNumber, y: HugeNumber, tolerance: HugeNumber = NEARLY_ZERO) -> bool:
    """|x - y| <= tolerance; NaN is never nearly equal, infinities only to themselves."""
    if x.is_nan() or y.is_nan():
        return False
    if equals(x, y):
        return True
    if x.is_infinity() or y.is_infinity():
        return False
    return compare_to(absolute(subtract(x, y)), tolerance) <= 0


def is_nearly_zero(x: HugeNumber, tolerance: HugeNumber = NEARLY_ZERO) -> bool:
    return is_nearly_equal(x, ZERO, tolerance)


__all__ = [
    "get_epsilon",
    "increment",
    "decrement",
    "bit_increment",
    "bit_decrement",
    "is_nearly_equal",
    "is_nearly_zero",
]
