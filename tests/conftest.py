"""Shared pytest fixtures for loxi tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from loxi.core.evaluator import evaluate
from loxi.core.parser import parse
from loxi.core.scanner import scan
from loxi.core.tokens import Value


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def lox_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing source text to a temporary .lox file."""

    def _write(source: str, name: str = "script.lox") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def eval_source() -> Callable[[str], Value]:
    """Scan, parse and evaluate in one step."""

    def _eval(source: str) -> Value:
        return evaluate(parse(scan(source)))

    return _eval
