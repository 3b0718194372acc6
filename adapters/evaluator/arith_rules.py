"""
Shared arithmetic rules for both evaluators.

Integers are exact Python ints; the safe-integer bound is enforced after
every binary operation instead of relying on wraparound or float rounding.
"""
from __future__ import annotations

from contracts import ArithError, is_safe_integer


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (not floor): -7 / 3 == -2."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


_BINARY_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _trunc_div,
}


def apply_unary(op: str, value: int) -> int:
    if op == "-":
        return -value
    if op == "+":
        return value
    raise ArithError(f"arithmetic error: unknown unary operator {op!r}")


def apply_binary(op: str, left: int, right: int) -> int:
    fn = _BINARY_FUNCS.get(op)
    if fn is None:
        raise ArithError(f"arithmetic error: unknown binary operator {op!r}")
    if op == "/" and right == 0:
        raise ArithError("arithmetic error: division by zero")

    result = fn(left, right)
    if not is_safe_integer(result):
        raise ArithError("arithmetic error: value outside safe integer range")
    return result
