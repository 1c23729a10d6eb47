"""
Wide fixed-point kernels for the transcendental functions.

Values are plain ints read as v / SCALE, carrying WORK_DIGITS fractional
digits, so the series and the argument reduction run with 32 guard digits
beyond the D-digit significand. Callers hand the final int to
`HugeNumber.from_components`, which truncates exactly once.

Alignment notes:
- exp: X = k·ln10 + r with 0 <= r < ln10, then e^r by Taylor series; the
  result is e^r scaled with a bare power-of-ten exponent k.
- log: the exact input is split as 10^k · 2^j · w with w in [0.75, 1.5), then
  ln w = 2·atanh((w - 1)/(w + 1)).
- Every series stops once a term floors to zero; SERIES_ITERATION_LIMIT is a
  backstop only.
- Floor division everywhere; a computed value sits within a few units of the
  last working digit, far below the D-digit truncation.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Tuple

from ..core.constants import SERIES_ITERATION_LIMIT
from ..core.number import HugeNumber, _digit_count, _ten_pow

# Debug printing control
DEBUG_FIXED = False

def _dbg(msg: str) -> None:
    if DEBUG_FIXED:
        print(msg)


#: Fractional digits carried by every kernel.
WORK_DIGITS: int = 50

#: Fixed-point unit: the int SCALE reads as 1.
SCALE: int = _ten_pow(WORK_DIGITS)


def _atanh_inverse(n: int) -> int:
    """atanh(1/n)·SCALE for an integer n >= 2."""
    power = SCALE // n
    n2 = n * n
    total = 0
    k = 1
    while power and k < SERIES_ITERATION_LIMIT:
        total += power // k
        power //= n2
        k += 2
    return total


#: ln 2 = 2·atanh(1/3), scaled.
LN2_FIXED: int = 2 * _atanh_inverse(3)

#: ln 10 = 3·ln 2 + ln(5/4) = 3·ln 2 + 2·atanh(1/9), scaled.
LN10_FIXED: int = 3 * LN2_FIXED + 2 * _atanh_inverse(9)


# ----------------------------
# Conversions
# ----------------------------

def to_fixed(value) -> int:
    """floor(value·SCALE) for a finite HugeNumber or a Fraction."""
    q = value if isinstance(value, Fraction) else value.to_fraction()
    return (q.numerator * SCALE) // q.denominator


def from_fixed(v: int, exponent: int = 0) -> HugeNumber:
    """HugeNumber for (v / SCALE)·10^exponent, truncated to D digits."""
    return HugeNumber.from_components(v, exponent - WORK_DIGITS)


def div_fixed(a: int, b: int) -> int:
    """(a / b)·SCALE, truncated toward zero."""
    q = (abs(a) * SCALE) // abs(b)
    return -q if (a < 0) != (b < 0) else q


# ----------------------------
# Exponential
# ----------------------------

def exp_fixed(x: int) -> Tuple[int, int]:
    """(v, k) with e^(x / SCALE) == (v / SCALE)·10^k and v in [SCALE, 10·SCALE)."""
    k = x // LN10_FIXED
    r = x - k * LN10_FIXED
    total = SCALE
    term = SCALE
    n = 1
    while term and n < SERIES_ITERATION_LIMIT:
        term = (term * r) // (SCALE * n)
        total += term
        n += 1
    _dbg(f"exp_fixed: k={k}, series stable after {n} terms")
    return total, k


# ----------------------------
# Logarithm
# ----------------------------

def _atanh_fixed(r: int) -> int:
    """atanh(r / SCALE)·SCALE for |r| well below SCALE."""
    negative = r < 0
    r = abs(r)
    r2 = (r * r) // SCALE
    term = r
    total = r
    k = 1
    while term and k < SERIES_ITERATION_LIMIT:
        term = (term * r2) // SCALE
        k += 2
        total += term // k
    return -total if negative else total


def log_fixed(q: Fraction) -> int:
    """ln(q)·SCALE for an exact positive rational q."""
    num, den = q.numerator, q.denominator
    k = _digit_count(num) - _digit_count(den)

    def scaled(k: int) -> int:
        if k >= 0:
            return (num * SCALE) // (den * _ten_pow(k))
        return (num * SCALE * _ten_pow(-k)) // den

    v = scaled(k)
    if v < SCALE:
        k -= 1
        v = scaled(k)

    # v / SCALE in [1, 10): halve into [0.75, 1.5).
    j = 0
    w = v
    while 2 * w >= 3 * SCALE:
        j += 1
        w = v >> j
    r = ((w - SCALE) * SCALE) // (w + SCALE)
    _dbg(f"log_fixed: 10^{k} * 2^{j} * {w}/SCALE, r={r}")
    return k * LN10_FIXED + j * LN2_FIXED + 2 * _atanh_fixed(r)


__all__ = [
    "WORK_DIGITS",
    "SCALE",
    "LN2_FIXED",
    "LN10_FIXED",
    "to_fixed",
    "from_fixed",
    "div_fixed",
    "exp_fixed",
    "log_fixed",
]
