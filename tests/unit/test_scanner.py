"""Tests for the loxi scanner.

Covers:
- Token types for punctuation, operators, literals and keywords
- Comments, whitespace and line tracking
- Lexical diagnostics (the scan never raises)
"""

from __future__ import annotations

import logging

import pytest

from loxi.core.scanner import Scanner, scan
from loxi.core.tokens import KEYWORDS, Token, TokenType


def _types(tokens: list[Token]) -> list[TokenType]:
    return [t.type for t in tokens]


class TestScannerTokens:
    """Scanner produces correct token sequences."""

    def test_simple_sum(self) -> None:
        tokens = scan("123 + 456")
        assert len(tokens) == 4
        assert tokens[0].type == TokenType.NUMBER
        assert tokens[0].literal == 123.0
        assert tokens[1].type == TokenType.PLUS
        assert tokens[2].literal == 456.0
        assert tokens[3].type == TokenType.EOF

    def test_single_character_punctuation(self) -> None:
        assert _types(scan("(){},.-+;*")) == [
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE,
            TokenType.RIGHT_BRACE,
            TokenType.COMMA,
            TokenType.DOT,
            TokenType.MINUS,
            TokenType.PLUS,
            TokenType.SEMICOLON,
            TokenType.STAR,
            TokenType.EOF,
        ]

    def test_one_or_two_character_operators(self) -> None:
        tokens = scan("! != = == > >= < <=")
        assert _types(tokens) == [
            TokenType.BANG,
            TokenType.BANG_EQUAL,
            TokenType.EQUAL,
            TokenType.EQUAL_EQUAL,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
            TokenType.EOF,
        ]
        assert [t.lexeme for t in tokens[:-1]] == ["!", "!=", "=", "==", ">", ">=", "<", "<="]

    def test_operators_without_spaces(self) -> None:
        assert _types(scan("!!=")) == [TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EOF]
        assert _types(scan("<==")) == [TokenType.LESS_EQUAL, TokenType.EQUAL, TokenType.EOF]

    def test_slash(self) -> None:
        tokens = scan("6 / 3")
        assert tokens[1].type == TokenType.SLASH
        assert tokens[1].lexeme == "/"

    def test_comment_is_discarded(self) -> None:
        tokens = scan("1 // the rest is ignored ( \" @\n* 2")
        assert _types(tokens) == [
            TokenType.NUMBER,
            TokenType.STAR,
            TokenType.NUMBER,
            TokenType.EOF,
        ]
        assert tokens[1].line == 2

    def test_comment_at_end_of_input(self) -> None:
        assert _types(scan("// nothing else")) == [TokenType.EOF]

    def test_keywords(self) -> None:
        source = " ".join(KEYWORDS)
        tokens = scan(source)
        assert _types(tokens) == [*KEYWORDS.values(), TokenType.EOF]
        assert len(KEYWORDS) == 16

    def test_keyword_literals(self) -> None:
        true_tok, false_tok, nil_tok, _ = scan("true false nil")
        assert true_tok.literal is True
        assert false_tok.literal is False
        assert nil_tok.literal is None
        assert true_tok.has_literal and false_tok.has_literal and nil_tok.has_literal

    def test_other_keywords_have_no_literal(self) -> None:
        tok = scan("while")[0]
        assert tok.type == TokenType.WHILE
        assert not tok.has_literal

    def test_identifier(self) -> None:
        tok = scan("orchid42")[0]
        assert tok.type == TokenType.IDENTIFIER
        assert tok.lexeme == "orchid42"
        assert tok.literal is None
        assert not tok.has_literal

    def test_underscore_is_not_part_of_identifier(self) -> None:
        scanner = Scanner("a_b")
        tokens = scanner.scan_tokens()
        assert [t.lexeme for t in tokens] == ["a", "b", ""]
        assert len(scanner.diagnostics) == 1


class TestScannerLiterals:
    """Number and string literal scanning."""

    def test_integer(self) -> None:
        tok = scan("42")[0]
        assert tok.type == TokenType.NUMBER
        assert tok.lexeme == "42"
        assert tok.literal == 42.0
        assert isinstance(tok.literal, float)

    def test_decimal(self) -> None:
        tok = scan("3.14")[0]
        assert tok.lexeme == "3.14"
        assert tok.literal == 3.14

    def test_trailing_dot_is_separate_token(self) -> None:
        tokens = scan("3.")
        assert _types(tokens) == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
        assert tokens[0].lexeme == "3"

    def test_leading_dot_is_separate_token(self) -> None:
        tokens = scan(".5")
        assert _types(tokens) == [TokenType.DOT, TokenType.NUMBER, TokenType.EOF]
        assert tokens[1].literal == 5.0

    def test_string(self) -> None:
        tok = scan('"hello"')[0]
        assert tok.type == TokenType.STRING
        assert tok.lexeme == '"hello"'
        assert tok.literal == "hello"

    def test_empty_string(self) -> None:
        tok = scan('""')[0]
        assert tok.type == TokenType.STRING
        assert tok.literal == ""

    def test_string_escapes(self) -> None:
        assert scan(r'"he\"llo"')[0].literal == 'he"llo'
        assert scan(r'"a\\b"')[0].literal == "a\\b"
        assert scan(r'"tab\there\n"')[0].literal == "tab\there\n"

    def test_multiline_string(self) -> None:
        tokens = scan('"one\ntwo" 3')
        assert tokens[0].literal == "one\ntwo"
        assert tokens[0].line == 1
        assert tokens[1].line == 2

    def test_non_ascii_string(self) -> None:
        assert scan('"héllo ✓"')[0].literal == "héllo ✓"


class TestScannerLines:
    """Line counting and end-of-input handling."""

    def test_empty_source(self) -> None:
        tokens = scan("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].lexeme == ""
        assert tokens[0].literal is None
        assert tokens[0].line == 1

    def test_whitespace_only(self) -> None:
        assert _types(scan(" \t\r ")) == [TokenType.EOF]

    def test_newlines_increment_line(self) -> None:
        tokens = scan("1\n\n2\n")
        assert [t.line for t in tokens] == [1, 3, 4]

    def test_exactly_one_eof(self) -> None:
        tokens = scan("1 + 2")
        assert [t.type for t in tokens].count(TokenType.EOF) == 1


class TestScannerDiagnostics:
    """Lexical problems are reported without stopping the scan."""

    def test_unterminated_string(self) -> None:
        scanner = Scanner('"abc')
        tokens = scanner.scan_tokens()
        assert _types(tokens) == [TokenType.EOF]
        assert len(scanner.diagnostics) == 1
        assert "Unterminated string" in scanner.diagnostics[0].message
        assert scanner.diagnostics[0].line == 1

    def test_unterminated_string_reports_start_line(self) -> None:
        scanner = Scanner('1\n"abc\ndef')
        tokens = scanner.scan_tokens()
        assert _types(tokens) == [TokenType.NUMBER, TokenType.EOF]
        assert scanner.diagnostics[0].line == 2
        assert tokens[-1].line == 3

    def test_trailing_backslash_is_unterminated(self) -> None:
        scanner = Scanner('"abc\\')
        assert _types(scanner.scan_tokens()) == [TokenType.EOF]
        assert len(scanner.diagnostics) == 1

    def test_unexpected_characters_are_skipped(self) -> None:
        scanner = Scanner("1 @ + # 2")
        tokens = scanner.scan_tokens()
        assert _types(tokens) == [
            TokenType.NUMBER,
            TokenType.PLUS,
            TokenType.NUMBER,
            TokenType.EOF,
        ]
        assert len(scanner.diagnostics) == 2
        assert "'@'" in scanner.diagnostics[0].message
        assert "'#'" in scanner.diagnostics[1].message

    def test_diagnostic_format(self) -> None:
        scanner = Scanner("\n$")
        scanner.scan_tokens()
        assert scanner.diagnostics[0].format() == "[line 2] Error: Unexpected character '$'."

    def test_scan_logs_diagnostics(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="loxi.core.scanner")
        scan("1 ~ 2")
        assert "Unexpected character '~'" in caplog.text
