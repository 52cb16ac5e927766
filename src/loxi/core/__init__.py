"""Core loxi functionality: scanner, parser, expression tree, evaluator, pretty-printer."""

from .errors import (
    ErrorContext,
    LexicalDiagnostic,
    LoxiError,
    ParseError,
    RuntimeTypeError,
)
from .evaluator import evaluate
from .expressions import Binary, Expr, Grouped, Literal, Unary
from .parser import Parser, parse, parse_source
from .printer import print_expr
from .scanner import Scanner, scan
from .session import RunResult, run_source
from .tokens import Token, TokenType, Value, format_value, type_name

__all__ = [
    "LoxiError",
    "ParseError",
    "RuntimeTypeError",
    "ErrorContext",
    "LexicalDiagnostic",
    "Token",
    "TokenType",
    "Value",
    "format_value",
    "type_name",
    "Scanner",
    "scan",
    "Expr",
    "Literal",
    "Grouped",
    "Unary",
    "Binary",
    "Parser",
    "parse",
    "parse_source",
    "evaluate",
    "print_expr",
    "RunResult",
    "run_source",
]
