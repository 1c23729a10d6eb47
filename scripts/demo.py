"""HugeNumber demo: representation, exact fractions and transcendental functions.

Scenarios covered:
S1) Normalisation: truncation to 18 digits, folded exponents, reduced fractions
S2) Exact fractions: 1/3 stays exact until it has to collapse
S3) Sentinels: NaN / ±Infinity / signed zero through arithmetic
S4) Functions: exp, log, pow, roots and trigonometry at 18 digits

Ad-hoc evaluation:
  python scripts/demo.py --eval pow 2 0.5
"""
from __future__ import annotations

from typing import Callable, Dict, List
import argparse
import sys

from hugenum import (
    HugeNumber,
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_ZERO,
    PI,
    to_huge,
    to_str,
    exp,
    log,
    pow,
    sqrt,
    cbrt,
    sin,
    cos,
    atan2,
)
from hugenum.core import (
    add,
    subtract,
    multiply,
    divide,
    modulo,
    fmt_sci,
    describe,
)

# ---------- pretty printers ----------

def show(label: str, x: HugeNumber, *, compact: bool = False) -> None:
    if compact:
        print(f"  {label:<28} {to_str(x)}")
        return
    info = describe(x)
    print(f"  {label:<28} {to_str(x):<28} sci={fmt_sci(x)}")
    print(f"  {'':<28} m={info['significand']}, e={info['exponent']}, d={info['denominator']}")


# ---------- operations for --eval ----------

UNARY: Dict[str, Callable[[HugeNumber], HugeNumber]] = {
    "exp": exp,
    "log": log,
    "sqrt": sqrt,
    "cbrt": cbrt,
    "sin": sin,
    "cos": cos,
}

BINARY: Dict[str, Callable[[HugeNumber, HugeNumber], HugeNumber]] = {
    "add": add,
    "sub": subtract,
    "mul": multiply,
    "div": divide,
    "mod": modulo,
    "pow": pow,
    "atan2": atan2,
}


def evaluate(op: str, operands: List[str], compact: bool) -> int:
    args = [to_huge(text) for text in operands]
    if op in UNARY and len(args) == 1:
        result = UNARY[op](args[0])
    elif op in BINARY and len(args) == 2:
        result = BINARY[op](args[0], args[1])
    else:
        print(f"unknown operation or wrong operand count: {op} {operands}")
        return 2
    print(f"\n=== {op}({', '.join(operands)}) ===")
    for i, a in enumerate(args):
        show(f"operand[{i}]", a, compact=compact)
    show("result", result, compact=compact)
    return 0


# -------- scenario registry helpers --------
class Scenario:
    def __init__(self, sid: str, title: str, fn: Callable[[bool], None]):
        self.sid = sid
        self.title = title
        self.fn = fn

scenarios: List[Scenario] = []

def register(sid: str, title: str, fn: Callable[[bool], None]) -> None:
    scenarios.append(Scenario(sid, title, fn))


def s1(compact: bool) -> None:
    show("1234567890123456789", HugeNumber.from_components(1234567890123456789), compact=compact)
    show("5 x 10^2", HugeNumber.from_components(5, 2), compact=compact)
    show("1.20", to_huge("1.20"), compact=compact)
    show("6/9", HugeNumber.from_components(6, 0, 9), compact=compact)


def s2(compact: bool) -> None:
    third = divide(to_huge(1), to_huge(3))
    show("1 / 3", third, compact=compact)
    show("1/3 + 1/3", add(third, third), compact=compact)
    show("1/3 x 3", multiply(third, to_huge(3)), compact=compact)
    show("1/3 + 1/7 (collapses)", add(third, to_huge("1/7")), compact=compact)


def s3(compact: bool) -> None:
    show("NaN + 1", add(NAN, to_huge(1)), compact=compact)
    show("Infinity - Infinity", subtract(POSITIVE_INFINITY, POSITIVE_INFINITY), compact=compact)
    show("1 / -0", divide(to_huge(1), NEGATIVE_ZERO), compact=compact)
    show("-0 x 5", multiply(NEGATIVE_ZERO, to_huge(5)), compact=compact)


def s4(compact: bool) -> None:
    show("exp(1)", exp(to_huge(1)), compact=compact)
    show("log(10)", log(to_huge(10)), compact=compact)
    show("2 ** 0.5", pow(to_huge(2), to_huge("0.5")), compact=compact)
    show("cbrt(-27)", cbrt(to_huge(-27)), compact=compact)
    show("sin(pi)", sin(PI), compact=compact)
    show("atan2(-1, -1)", atan2(to_huge(-1), to_huge(-1)), compact=compact)


register("S1", "S1) Normalisation", s1)
register("S2", "S2) Exact fractions", s2)
register("S3", "S3) Sentinels", s3)
register("S4", "S4) Functions", s4)


# ---------- run scenarios ----------
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="HugeNumber demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1,S3)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    parser.add_argument("--compact", action="store_true", help="Compact output: text form only (no fields, no scientific form)")
    parser.add_argument("--eval", nargs="+", metavar=("OP", "OPERAND"), default=None,
                        help=f"Evaluate one operation: {', '.join(sorted({**UNARY, **BINARY}))}")
    args = parser.parse_args(sys.argv[1:])

    if args.eval:
        sys.exit(evaluate(args.eval[0], args.eval[1:], bool(args.compact)))

    only = set(s.strip() for s in args.only.split(",")) if args.only else None
    skip = set(s.strip() for s in args.skip.split(",")) if args.skip else set()
    for sc in scenarios:
        if only is not None and sc.sid not in only:
            continue
        if sc.sid in skip:
            continue
        print(f"\n=== {sc.title} ===")
        sc.fn(bool(args.compact))
