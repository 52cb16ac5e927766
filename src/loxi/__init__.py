"""
loxi - scanner, parser and tree-walking evaluator for Lox expressions.

Usage:
    from loxi import evaluate, parse, print_expr, scan

    expr = parse(scan("1 + 2 * 3"))
    print_expr(expr)  # "(+ 1 (* 2 3))"
    evaluate(expr)    # 7.0
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    LexicalDiagnostic,
    LoxiError,
    ParseError,
    RuntimeTypeError,
    evaluate,
    parse,
    parse_source,
    print_expr,
    run_source,
    scan,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "scan",
    "parse",
    "parse_source",
    "evaluate",
    "print_expr",
    "run_source",
    "LoxiError",
    "ParseError",
    "RuntimeTypeError",
    "LexicalDiagnostic",
]
