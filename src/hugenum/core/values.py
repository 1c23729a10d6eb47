"""
Named HugeNumber values: sentinels, identities and full-precision constants.

Mathematical constants are stored as pre-reduced 18-digit significand/exponent
pairs (rounded at the 18th digit), so they are exact literals rather than the
result of any series evaluation.
"""

from __future__ import annotations

from .constants import (
    MAX_SIGNIFICAND,
    MIN_SIGNIFICAND,
    MIN_EXPONENT,
    MAX_EXPONENT,
    POSITIVE_INFINITY_SIGNIFICAND,
    NEGATIVE_INFINITY_SIGNIFICAND,
    NAN_SIGNIFICAND,
)
from .number import HugeNumber

_c = HugeNumber.from_components

# ---------------------------------------------------------------------------
# Sentinels (raw encodings, bypass normalisation)
# ---------------------------------------------------------------------------

NAN: HugeNumber = HugeNumber(NAN_SIGNIFICAND, 0, 1)
POSITIVE_INFINITY: HugeNumber = HugeNumber(POSITIVE_INFINITY_SIGNIFICAND, 0, 1)
NEGATIVE_INFINITY: HugeNumber = HugeNumber(NEGATIVE_INFINITY_SIGNIFICAND, 0, 1)
ZERO: HugeNumber = HugeNumber(0, 0, 1)
#: Negative zero: zero significand carrying a negative exponent.
NEGATIVE_ZERO: HugeNumber = HugeNumber(0, -1, 1)

#: Smallest positive value; also GetEpsilon(0).
EPSILON: HugeNumber = HugeNumber(1, MIN_EXPONENT, 1)
MAX_VALUE: HugeNumber = HugeNumber(MAX_SIGNIFICAND, MAX_EXPONENT, 1)
MIN_VALUE: HugeNumber = HugeNumber(MIN_SIGNIFICAND, MAX_EXPONENT, 1)

# ---------------------------------------------------------------------------
# Small exact values
# ---------------------------------------------------------------------------

ONE: HugeNumber = _c(1)
NEGATIVE_ONE: HugeNumber = _c(-1)
TWO: HugeNumber = _c(2)
TEN: HugeNumber = _c(10)
HALF: HugeNumber = _c(5, -1)
THIRD: HugeNumber = _c(1, 0, 3)
#: Default tolerance for near-equality checks.
NEARLY_ZERO: HugeNumber = _c(1, -15)

# ---------------------------------------------------------------------------
# Mathematical constants (18 significant digits)
# ---------------------------------------------------------------------------

E: HugeNumber = _c(271828182845904524, -17)
PI: HugeNumber = _c(314159265358979324, -17)
TAU: HugeNumber = _c(628318530717958648, -17)
HALF_PI: HugeNumber = _c(157079632679489662, -17)
QUARTER_PI: HugeNumber = _c(785398163397448310, -18)
LN2: HugeNumber = _c(693147180559945309, -18)
LN10: HugeNumber = _c(230258509299404568, -17)
PHI: HugeNumber = _c(161803398874989485, -17)
ROOT2: HugeNumber = _c(141421356237309505, -17)

# ---------------------------------------------------------------------------
# SI prefixes
# ---------------------------------------------------------------------------

YOCTO: HugeNumber = _c(1, -24)
ZEPTO: HugeNumber = _c(1, -21)
ATTO: HugeNumber = _c(1, -18)
FEMTO: HugeNumber = _c(1, -15)
PICO: HugeNumber = _c(1, -12)
NANO: HugeNumber = _c(1, -9)
MICRO: HugeNumber = _c(1, -6)
MILLI: HugeNumber = _c(1, -3)
CENTI: HugeNumber = _c(1, -2)
DECI: HugeNumber = _c(1, -1)
DECA: HugeNumber = _c(10)
HECTO: HugeNumber = _c(100)
KILO: HugeNumber = _c(1, 3)
MEGA: HugeNumber = _c(1, 6)
GIGA: HugeNumber = _c(1, 9)
TERA: HugeNumber = _c(1, 12)
PETA: HugeNumber = _c(1, 15)
EXA: HugeNumber = _c(1, 18)
ZETTA: HugeNumber = _c(1, 21)
YOTTA: HugeNumber = _c(1, 24)


__all__ = [
    "NAN",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "ZERO",
    "NEGATIVE_ZERO",
    "EPSILON",
    "MAX_VALUE",
    "MIN_VALUE",
    "ONE",
    "NEGATIVE_ONE",
    "TWO",
    "TEN",
    "HALF",
    "THIRD",
    "NEARLY_ZERO",
    "E",
    "PI",
    "TAU",
    "HALF_PI",
    "QUARTER_PI",
    "LN2",
    "LN10",
    "PHI",
    "ROOT2",
    "YOCTO",
    "ZEPTO",
    "ATTO",
    "FEMTO",
    "PICO",
    "NANO",
    "MICRO",
    "MILLI",
    "CENTI",
    "DECI",
    "DECA",
    "HECTO",
    "KILO",
    "MEGA",
    "GIGA",
    "TERA",
    "PETA",
    "EXA",
    "ZETTA",
    "YOTTA",
]
