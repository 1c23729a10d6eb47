"""
Hyperbolic functions and their inverses.

Alignment notes:
- sinh and tanh go through expm1 so that small arguments keep their digits.
- tanh saturates to ±1 once |x| > 22, where e^(-2|x|) is below 10^-18.
- Inverses use the "plus one" logarithm wherever the argument is near zero.
"""

from __future__ import annotations

from ..core.arithmetic import add, divide, multiply, negate, subtract
from ..core.number import HugeNumber
from ..core.ordering import compare_magnitude, compare_to
from ..core.rationals import to_decimal_form
from ..core.values import (
    HALF,
    NAN,
    NEGATIVE_INFINITY,
    NEGATIVE_ONE,
    ONE,
    POSITIVE_INFINITY,
    TWO,
    ZERO,
)
from .exponential import exp, expm1
from .logarithmic import log, logp1
from .power import sqrt

#: Beyond this magnitude tanh(x) is ±1 to every representable digit.
_TANH_SATURATION = HugeNumber.from_components(22)


def sinh(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_infinity() or x.is_zero():
        return x
    return to_decimal_form(multiply(HALF, subtract(expm1(x), expm1(negate(x)))))


def cosh(x: HugeNumber) -> HugeNumber:
    if x.is_nan():
        return x
    if x.is_infinity():
        return POSITIVE_INFINITY
    if x.is_zero():
        return ONE
    return to_decimal_form(multiply(HALF, add(exp(x), exp(negate(x)))))


def tanh(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_zero():
        return x
    if x.is_infinity() or compare_magnitude(x, _TANH_SATURATION) > 0:
        return NEGATIVE_ONE if x.is_negative() else ONE
    # tanh(x) = (e^2x - 1) / (e^2x + 1)
    e2 = expm1(multiply(TWO, x))
    return to_decimal_form(divide(e2, add(e2, TWO)))


def asinh(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_infinity() or x.is_zero():
        return x
    if x.is_negative():
        return negate(asinh(negate(x)))
    # asinh(x) = log1p(x + x² / (1 + sqrt(1 + x²)))
    x2 = multiply(x, x)
    return logp1(add(x, divide(x2, add(ONE, sqrt(add(ONE, x2))))))


def acosh(x: HugeNumber) -> HugeNumber:
    """Inverse hyperbolic cosine (NaN below 1)."""
    if x.is_nan() or x.is_positive_infinity():
        return x
    c = compare_to(x, ONE)
    if c < 0:
        return NAN
    if c == 0:
        return ZERO
    return log(add(x, sqrt(subtract(multiply(x, x), ONE))))


def atanh(x: HugeNumber) -> HugeNumber:
    """Inverse hyperbolic tangent: ±Infinity at ±1, NaN beyond."""
    if x.is_nan() or x.is_zero():
        return x
    c = compare_magnitude(x, ONE)
    if c > 0 or x.is_infinity():
        return NAN
    if c == 0:
        return NEGATIVE_INFINITY if x.is_negative() else POSITIVE_INFINITY
    return to_decimal_form(multiply(HALF, subtract(logp1(x), logp1(negate(x)))))


__all__ = [
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
]
