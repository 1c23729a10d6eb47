"""
HugeNumber Functions
====================

Transcendental and algebraic functions built on the core arithmetic engine:
exponentials, logarithms, powers and roots, hyperbolic and trigonometric
functions. Every result leaves in decimal form.
"""

# Exponentials
from .exponential import (
    exp,
    exp2,
    exp10,
    expm1,
    exp2m1,
    exp10m1,
)

# Logarithms
from .logarithmic import (
    log,
    log_base,
    log2,
    log10,
    logp1,
    log2p1,
    log10p1,
)

# Powers and roots
from .power import (
    INTEGER_POWER_LIMIT,
    pow,
    sqrt,
    cbrt,
    root_n,
    hypot,
)

# Hyperbolic
from .hyperbolic import (
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
)

# Trigonometric
from .trigonometric import (
    sin,
    cos,
    tan,
    atan,
    asin,
    acos,
    atan2,
)

__all__ = [
    # exponential
    "exp",
    "exp2",
    "exp10",
    "expm1",
    "exp2m1",
    "exp10m1",
    # logarithmic
    "log",
    "log_base",
    "log2",
    "log10",
    "logp1",
    "log2p1",
    "log10p1",
    # power
    "INTEGER_POWER_LIMIT",
    "pow",
    "sqrt",
    "cbrt",
    "root_n",
    "hypot",
    # hyperbolic
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    # trigonometric
    "sin",
    "cos",
    "tan",
    "atan",
    "asin",
    "acos",
    "atan2",
]
