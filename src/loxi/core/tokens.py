"""
Token and value types for loxi.

Runtime values are plain Python objects:

- Number  -> float
- String  -> str
- Boolean -> bool
- Nil     -> None
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

Value = float | str | bool | None


class TokenType(StrEnum):
    """Token types for the Lox lexical grammar."""

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FOR = "for"
    FUN = "fun"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    EOF = "EOF"


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_LITERALS: dict[TokenType, Value] = {
    TokenType.TRUE: True,
    TokenType.FALSE: False,
    TokenType.NIL: None,
}

LITERAL_TYPES = frozenset(
    {TokenType.NUMBER, TokenType.STRING, TokenType.TRUE, TokenType.FALSE, TokenType.NIL}
)


@dataclass(frozen=True)
class Token:
    """
    A single token scanned from source text.

    Attributes:
        type: Type of token
        lexeme: Exact source text of the token (empty for EOF)
        literal: Resolved value for NUMBER, STRING, true, false and nil
        line: Line number the token starts on (1-indexed)
    """

    type: TokenType
    lexeme: str
    literal: Value = None
    line: int = 1

    @property
    def has_literal(self) -> bool:
        """Whether ``literal`` is meaningful (nil's literal is None)."""
        return self.type in LITERAL_TYPES

    def __repr__(self) -> str:
        if self.has_literal:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"


def is_number(value: object) -> bool:
    """Whether a value is a Lox number."""
    # bool is an int subclass but never a Number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Value) -> str:
    """Name of the runtime variant of a value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if is_number(value):
        return "number"
    return type(value).__name__


def format_number(value: float) -> str:
    """Render a number without exponent notation, dropping a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        text = str(int(value))
        if text == "0" and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    return format(Decimal(repr(float(value))), "f")


def format_value(value: Value) -> str:
    """Canonical text form of a runtime value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return format_number(value)
