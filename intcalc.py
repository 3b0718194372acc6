#!/usr/bin/env python3
"""
intcalc.py — IntCalc command line.

Evaluates one integer arithmetic expression. Every word after the options is
part of the expression; words are joined with single spaces, so quoting is
optional.

Trace mode prints each post-order intermediate value as it is computed,
then the final value. Enable it with --trace or INTCALC_TRACE=1
(legacy: STEP_MODE=1).

Exit codes:
    0  success
    1  parameter error (no expression)
    2  syntax error
    3  arithmetic error (division by zero, safe-integer overflow)

Usage:
    python intcalc.py "6 + 5 - 4 * 3 / -2"
    python intcalc.py -6 - -2
    python intcalc.py --trace "(1 + 2) * 3"
    python intcalc.py -- -(1)
"""
from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from calculator import Calculator
from config import Settings
from contracts import CalcError

# Option words recognised before the expression starts.
_OPTION_WORDS = frozenset({"-t", "--trace", "-v", "--verbose", "-h", "--help", "--version"})


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False, soft_wrap=True)
    return _CONSOLE


def _split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """
    Splits argv into (option words, expression words).
    Expressions such as "-(1)" or "--1" look like options to argparse, so
    only the leading known option words go through it.
    """
    i = 0
    while i < len(argv) and argv[i] in _OPTION_WORDS:
        i += 1
    if i < len(argv) and argv[i] == "--":
        return argv[:i], argv[i + 1:]
    return argv[:i], argv[i:]


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intcalc",
        description="IntCalc: integer arithmetic expression evaluator",
        usage="%(prog)s [-t] [-v] [--] EXPRESSION...",
    )
    parser.add_argument("--trace", "-t", action="store_true", default=settings.trace,
                        help="Print every intermediate value (post-order)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging on stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {settings.app_version}")
    return parser


def _print_trace(calc: Calculator, expr: str) -> None:
    last = None
    for i, value in enumerate(calc.trace(expr), start=1):
        _console().print(f"step {i}: {value}")
        last = value
    _console().print(str(last))


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    option_words, expr_words = _split_argv(list(sys.argv[1:] if argv is None else argv))
    args = _build_parser(settings).parse_args(option_words)

    logging.basicConfig(level="DEBUG" if args.verbose else settings.log_level.upper())

    expr = " ".join(expr_words).strip()
    calc = Calculator()
    try:
        if args.trace:
            _print_trace(calc, expr)
        else:
            _console().print(str(calc.evaluate(expr)))
    except CalcError as err:
        print(err.message, file=sys.stderr)
        sys.exit(err.code)


if __name__ == "__main__":
    main()
