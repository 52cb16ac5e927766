"""Tests for running source text through the whole pipeline."""

from __future__ import annotations

from pathlib import Path

from loxi import __version__, run_source
from loxi.core.errors import ParseError, RuntimeTypeError
from loxi.core.session import EXIT_DATAERR, EXIT_OK, EXIT_SOFTWARE


class TestRunSource:
    def test_evaluates(self) -> None:
        result = run_source("1 + 2 * 3")
        assert result.ok
        assert result.output == "7"
        assert result.exit_code == EXIT_OK

    def test_pretty(self) -> None:
        result = run_source("(1 + 2) * 3", pretty=True)
        assert result.output == "(* (group (+ 1 2)) 3)"

    def test_string_output(self) -> None:
        assert run_source('"foo" + "bar"').output == '"foobar"'

    def test_parse_error_is_captured(self) -> None:
        result = run_source("1 +")
        assert not result.ok
        assert isinstance(result.error, ParseError)
        assert result.output is None
        assert result.exit_code == EXIT_DATAERR

    def test_type_error_is_captured(self) -> None:
        result = run_source('"foo" - 1')
        assert isinstance(result.error, RuntimeTypeError)
        assert result.output is None
        assert result.exit_code == EXIT_SOFTWARE

    def test_pretty_skips_type_checks(self) -> None:
        result = run_source('"foo" - 1', pretty=True)
        assert result.ok
        assert result.output == '(- "foo" 1)'

    def test_diagnostics_are_kept(self) -> None:
        result = run_source('1 + 2 "oops')
        assert len(result.diagnostics) == 1
        assert result.ok
        assert result.output == "3"

    def test_file_attached_to_error(self) -> None:
        result = run_source("(1", file=Path("calc.lox"))
        assert str(result.error).startswith("calc.lox:[line 1] at end")

    def test_deep_nesting_is_a_parse_error(self) -> None:
        result = run_source("(" * 100 + "1" + ")" * 100)
        assert isinstance(result.error, ParseError)
        assert result.exit_code == EXIT_DATAERR

    def test_long_chain_evaluates(self) -> None:
        assert run_source(" + ".join(["1"] * 500)).output == "500"


def test_version_is_a_string() -> None:
    assert isinstance(__version__, str)
    assert __version__
