"""
Error types for loxi scanning, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxi.core.tokens import Token


class LoxiError(Exception):
    """Base exception for all loxi errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    def __str__(self) -> str:
        # context may gain a file after construction
        return self._format_message()


class ParseError(LoxiError):
    """
    Raised when a token sequence cannot be parsed into an expression.

    Examples:
    - Unexpected token where an expression was required
    - Grouping without its closing parenthesis
    - Tokens left over after a complete expression
    """

    def __init__(self, message: str, token: Token, context: ErrorContext | None = None):
        self.token = token
        super().__init__(message, context or ErrorContext.for_token(token))


class RuntimeTypeError(LoxiError):
    """
    Raised when an operator is applied to operands it does not support.

    Examples:
    - "foo" - 1
    - !3
    - 1 == "1"
    """

    def __init__(self, message: str, operator: Token, operand_types: tuple[str, ...]):
        self.operator = operator
        self.operand_types = operand_types
        super().__init__(message, ErrorContext.for_token(operator))


@dataclass
class ErrorContext:
    """
    Source location for an error.

    Attributes:
        line: Line number (1-indexed)
        lexeme: Text of the token the error points at, empty for end of input
        file: Optional source file the text was read from
    """

    line: int
    lexeme: str | None = None
    file: Path | None = None

    @classmethod
    def for_token(cls, token: Token) -> ErrorContext:
        return cls(line=token.line, lexeme=token.lexeme)

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "script.lox:[line 3] at '+'"
        """
        location = f"[line {self.line}]"
        if self.lexeme is not None:
            location += " at end" if self.lexeme == "" else f" at '{self.lexeme}'"
        if self.file:
            location = f"{self.file}:{location}"
        return location


@dataclass(frozen=True)
class LexicalDiagnostic:
    """A non-fatal problem found while scanning (the scan carries on)."""

    line: int
    message: str

    def format(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    def __str__(self) -> str:
        return self.format()


def make_parse_error(message: str, token: Token, file: Path | None = None) -> ParseError:
    """
    Helper to create a ParseError pointing at a token.

    Args:
        message: Error description
        token: Offending token
        file: Optional source file path

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(line=token.line, lexeme=token.lexeme, file=file)
    return ParseError(message, token, context)
