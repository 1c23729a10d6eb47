# Top-level API for hugenum.
"""
Top-level API for hugenum.

This module exposes the stable interface of the HugeNumber type:
  - HugeNumber: immutable extended-range decimal value (18 digits, 16-bit exponent,
    optional exact denominator up to 65535)
  - named values and constants (NaN, infinities, zeros, e, π, τ, ...)
  - functions: exponentials, logarithms, powers, roots, hyperbolic and trigonometric

The full arithmetic, ordering, rounding, conversion and epsilon surface lives in
`hugenum.core`; the operator protocol on HugeNumber delegates to it.
"""

# NOTE:
#   Debug printing flags (DEBUG_ARITHMETIC, DEBUG_EXP, ...) live on their own
#   modules. Import the module explicitly to toggle them.

from __future__ import annotations

from .core import (
    HugeNumber,
    MidpointRounding,
    NotANumberError,
    RangeExceededError,
    InvalidArgumentError,
    to_huge,
    to_str,
)

# Named values
from .core import (
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    ZERO,
    NEGATIVE_ZERO,
    EPSILON,
    MAX_VALUE,
    MIN_VALUE,
    ONE,
    NEGATIVE_ONE,
    E,
    PI,
    TAU,
)

# Functions
from .functions import (
    exp,
    exp2,
    exp10,
    expm1,
    exp2m1,
    exp10m1,
    log,
    log_base,
    log2,
    log10,
    logp1,
    log2p1,
    log10p1,
    pow,
    sqrt,
    cbrt,
    root_n,
    hypot,
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
    sin,
    cos,
    tan,
    atan,
    asin,
    acos,
    atan2,
)

__all__ = [
    "HugeNumber",
    "MidpointRounding",
    "NotANumberError",
    "RangeExceededError",
    "InvalidArgumentError",
    "to_huge",
    "to_str",
    # values
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
    "E",
    "PI",
    "TAU",
    # functions
    "exp",
    "exp2",
    "exp10",
    "expm1",
    "exp2m1",
    "exp10m1",
    "log",
    "log_base",
    "log2",
    "log10",
    "logp1",
    "log2p1",
    "log10p1",
    "pow",
    "sqrt",
    "cbrt",
    "root_n",
    "hypot",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    "sin",
    "cos",
    "tan",
    "atan",
    "asin",
    "acos",
    "atan2",
]
