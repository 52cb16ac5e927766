"""
Scanner for loxi.

Converts raw source text into a list of tokens with line tracking. Scanning
never fails: problems are recorded as diagnostics and the offending text is
skipped.
"""

from __future__ import annotations

import logging

from loxi.core.errors import LexicalDiagnostic
from loxi.core.tokens import KEYWORD_LITERALS, KEYWORDS, Token, TokenType, Value

logger = logging.getLogger(__name__)

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# char -> (type without "=", type with "=")
_EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}

_ESCAPES = {"n": "\n", "t": "\t"}


def _is_digit(c: str | None) -> bool:
    return c is not None and "0" <= c <= "9"


class Scanner:
    """
    Scanner for loxi source text.

    Single left-to-right pass with a cursor and a line counter.
    """

    def __init__(self, source: str):
        """
        Initialize scanner.

        Args:
            source: Source text to scan
        """
        self.source = source
        self.pos = 0
        self.start = 0
        self.line = 1
        self.tokens: list[Token] = []
        self.diagnostics: list[LexicalDiagnostic] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return None
        return self.source[pos]

    def advance(self) -> str:
        c = self.source[self.pos]
        self.pos += 1
        return c

    def is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def add_token(self, token_type: TokenType, literal: Value = None, line: int | None = None) -> None:
        lexeme = self.source[self.start : self.pos]
        self.tokens.append(Token(token_type, lexeme, literal, self.line if line is None else line))

    def report(self, message: str, line: int | None = None) -> None:
        diagnostic = LexicalDiagnostic(line=self.line if line is None else line, message=message)
        self.diagnostics.append(diagnostic)
        logger.debug("%s", diagnostic.format())

    def scan_tokens(self) -> list[Token]:
        """
        Scan the entire source text.

        Returns:
            List of tokens, always ending with exactly one EOF token
        """
        while not self.is_at_end():
            self.start = self.pos
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug(
            "Scanned %d token(s), %d diagnostic(s)", len(self.tokens), len(self.diagnostics)
        )
        return self.tokens

    def scan_token(self) -> None:
        c = self.advance()

        if c in _SINGLE_CHAR_TOKENS:
            self.add_token(_SINGLE_CHAR_TOKENS[c])
        elif c in _EQUAL_SUFFIX_TOKENS:
            single, double = _EQUAL_SUFFIX_TOKENS[c]
            if self.current_char() == "=":
                self.advance()
                self.add_token(double)
            else:
                self.add_token(single)
        elif c == "/":
            if self.current_char() == "/":
                self.skip_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (" ", "\r", "\t"):
            pass
        elif c == "\n":
            self.line += 1
        elif c == '"':
            self.read_string()
        elif _is_digit(c):
            self.read_number()
        elif c.isalpha():
            self.read_identifier()
        else:
            self.report(f"Unexpected character {c!r}.")

    def skip_comment(self) -> None:
        """Skip comment (from // to end of line, newline left in place)."""
        while self.current_char() is not None and self.current_char() != "\n":
            self.advance()

    def read_string(self) -> None:
        """Read a double-quoted string; the opening quote is already consumed."""
        start_line = self.line
        chars: list[str] = []

        while True:
            current = self.current_char()
            if current is None or current == '"':
                break

            if current == "\\":
                self.advance()
                escape_char = self.current_char()
                if escape_char is None:
                    break
                chars.append(_ESCAPES.get(escape_char, escape_char))
            else:
                chars.append(current)

            if self.advance() == "\n":
                self.line += 1

        if self.is_at_end():
            self.report("Unterminated string.", line=start_line)
            return

        self.advance()  # closing quote
        self.add_token(TokenType.STRING, "".join(chars), line=start_line)

    def read_number(self) -> None:
        """Read an integer or decimal number; the first digit is already consumed."""
        while _is_digit(self.current_char()):
            self.advance()

        # "3.1" is one number, "3." leaves the dot for the next token
        if self.current_char() == "." and _is_digit(self.peek_char()):
            self.advance()
            while _is_digit(self.current_char()):
                self.advance()

        text = self.source[self.start : self.pos]
        try:
            value = float(text)
        except ValueError:
            self.report(f"Invalid number {text!r}.")
            return
        self.add_token(TokenType.NUMBER, value)

    def read_identifier(self) -> None:
        """Read an identifier or keyword."""
        while (c := self.current_char()) is not None and c.isalnum():
            self.advance()

        text = self.source[self.start : self.pos]
        token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
        self.add_token(token_type, KEYWORD_LITERALS.get(token_type))


def scan(source: str) -> list[Token]:
    """Scan source text into tokens; diagnostics are logged as warnings.

    Use :class:`Scanner` directly to inspect the diagnostics.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    for diagnostic in scanner.diagnostics:
        logger.warning("%s", diagnostic.format())
    return tokens
