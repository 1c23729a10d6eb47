"""
HugeNumber Core Constants (integer domain)
==========================================

Only integer bounds and sentinel encodings live here. Named HugeNumber values
(ZERO, PI, MAX_VALUE, ...) are built in `values.py` once the type exists.
"""

# NOTE: every bound below is inclusive; finite significands never leave
#       [MIN_SIGNIFICAND, MAX_SIGNIFICAND] after normalisation.

# ---------------------------------------------------------------------------
# Significand / exponent / denominator ranges
# ---------------------------------------------------------------------------

#: Number of significant decimal digits a finite significand may carry (D).
SIGNIFICAND_DIGITS: int = 18
MAX_SIGNIFICAND: int = (10 ** SIGNIFICAND_DIGITS) - 1   # 999...999 (18 nines)
MIN_SIGNIFICAND: int = -MAX_SIGNIFICAND

#: Allowed exponent range (power of 10), a signed 16-bit field.
MIN_EXPONENT: int = -32768
MAX_EXPONENT: int = 32767

#: Largest denominator an exact fraction may carry (unsigned 16-bit field).
DENOMINATOR_MAX: int = 65535


# ---------------------------------------------------------------------------
# Sentinel encodings (out-of-range significands)
# ---------------------------------------------------------------------------

#: Infinities sit just outside the finite significand range; the sign of the
#: significand is the sign of the infinity.
POSITIVE_INFINITY_SIGNIFICAND: int = MAX_SIGNIFICAND + 1
NEGATIVE_INFINITY_SIGNIFICAND: int = -POSITIVE_INFINITY_SIGNIFICAND

#: Reserved NaN significand (largest signed 64-bit value).
NAN_SIGNIFICAND: int = (2 ** 63) - 1


# ---------------------------------------------------------------------------
# Series evaluation
# ---------------------------------------------------------------------------

#: Backstop for every convergent series; real evaluations stop far earlier,
#: once a further term no longer changes the accumulated sum.
SERIES_ITERATION_LIMIT: int = 1_000_000


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "SIGNIFICAND_DIGITS",
    "MAX_SIGNIFICAND",
    "MIN_SIGNIFICAND",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "DENOMINATOR_MAX",
    "POSITIVE_INFINITY_SIGNIFICAND",
    "NEGATIVE_INFINITY_SIGNIFICAND",
    "NAN_SIGNIFICAND",
    "SERIES_ITERATION_LIMIT",
]
