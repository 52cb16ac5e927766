"""
Recursive descent parser for loxi.

Grammar (precedence low to high):
    expression  → equality
    equality    → comparison (("==" | "!=") comparison)*
    comparison  → term (("<" | "<=" | ">" | ">=") term)*
    term        → factor (("+" | "-") factor)*
    factor      → unary (("*" | "/") unary)*
    unary       → ("-" | "!") unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Groupings may nest at most MAX_NESTING levels deep; deeper input is a
ParseError rather than a RecursionError.
"""

from __future__ import annotations

import logging
from pathlib import Path

from loxi.core.errors import LexicalDiagnostic, make_parse_error
from loxi.core.expressions import Binary, Expr, Grouped, Literal, Unary
from loxi.core.scanner import Scanner
from loxi.core.tokens import Token, TokenType

logger = logging.getLogger(__name__)

_EQUALITY_OPS = (TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL)
_COMPARISON_OPS = (
    TokenType.LESS,
    TokenType.LESS_EQUAL,
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
)
_TERM_OPS = (TokenType.PLUS, TokenType.MINUS)
_FACTOR_OPS = (TokenType.STAR, TokenType.SLASH)
_UNARY_OPS = (TokenType.MINUS, TokenType.BANG)

# Each grouping level costs a dozen Python frames
MAX_NESTING = 64


class Parser:
    """Recursive descent parser over a scanned token list."""

    def __init__(self, tokens: list[Token], file: Path | None = None) -> None:
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.file = file
        self.pos = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        # Never move past EOF
        if tok.type != TokenType.EOF:
            self.pos += 1
        return tok

    def check(self, *types: TokenType) -> bool:
        return self.current.type in types

    def match(self, *types: TokenType) -> Token | None:
        if self.check(*types):
            return self.advance()
        return None

    def expect(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise make_parse_error(message, self.current, self.file)

    def parse(self) -> Expr:
        """Parse one complete expression, rejecting any leftover tokens."""
        expr = self.parse_expression()
        if not self.check(TokenType.EOF):
            raise make_parse_error("Expect end of expression.", self.current, self.file)
        return expr

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        return self.parse_equality()

    def parse_equality(self) -> Expr:
        """comparison (('==' | '!=') comparison)*"""
        return self._parse_left_assoc(self.parse_comparison, _EQUALITY_OPS)

    def parse_comparison(self) -> Expr:
        """term (('<' | '<=' | '>' | '>=') term)*"""
        return self._parse_left_assoc(self.parse_term, _COMPARISON_OPS)

    def parse_term(self) -> Expr:
        """factor (('+' | '-') factor)*"""
        return self._parse_left_assoc(self.parse_factor, _TERM_OPS)

    def parse_factor(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        return self._parse_left_assoc(self.parse_unary, _FACTOR_OPS)

    def _parse_left_assoc(self, operand, operators: tuple[TokenType, ...]) -> Expr:
        left = operand()
        while operator := self.match(*operators):
            right = operand()
            left = Binary(left=left, operator=operator, right=right)
        return left

    def parse_unary(self) -> Expr:
        """('-' | '!') unary | primary

        Prefix operators are collected in a loop, so a long run of them does
        not grow the call stack.
        """
        operators: list[Token] = []
        while operator := self.match(*_UNARY_OPS):
            operators.append(operator)

        expr = self.parse_primary()
        for operator in reversed(operators):
            expr = Unary(operator=operator, right=expr)
        return expr

    def parse_primary(self) -> Expr:
        """NUMBER | STRING | 'true' | 'false' | 'nil' | '(' expression ')'"""
        tok = self.current

        if tok.has_literal:
            self.advance()
            return Literal(value=tok.literal)

        if tok.type == TokenType.LEFT_PAREN:
            if self.depth >= MAX_NESTING:
                raise make_parse_error("Expression nested too deeply.", tok, self.file)
            self.advance()
            self.depth += 1
            try:
                expr = self.parse_expression()
            finally:
                self.depth -= 1
            self.expect(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouped(expression=expr)

        raise make_parse_error("Expect expression.", tok, self.file)


def parse(tokens: list[Token], file: Path | None = None) -> Expr:
    """Parse a scanned token list into an expression tree.

    Args:
        tokens: Token list ending with EOF (as returned by the scanner)
        file: Optional source path, attached to error locations

    Returns:
        Parsed expression tree.

    Raises:
        ParseError: If the tokens do not form exactly one expression.
    """
    expr = Parser(tokens, file).parse()
    logger.debug("Parsed %d token(s) into %s", len(tokens), type(expr).__name__)
    return expr


def parse_source(source: str, file: Path | None = None) -> tuple[Expr, list[LexicalDiagnostic]]:
    """Scan and parse source text.

    Returns:
        The expression tree and the scanner's diagnostics.

    Raises:
        ParseError: If the expression is invalid.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return parse(tokens, file), scanner.diagnostics
