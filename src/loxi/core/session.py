"""
Run one unit of source text through the whole pipeline.

Usage:
    from loxi.core.session import run_source

    result = run_source("1 + 2 * 3")
    # result.output == "7"
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from loxi.core.errors import LexicalDiagnostic, LoxiError, ParseError, RuntimeTypeError
from loxi.core.evaluator import evaluate
from loxi.core.parser import parse
from loxi.core.printer import print_expr
from loxi.core.scanner import Scanner
from loxi.core.tokens import format_value

logger = logging.getLogger(__name__)

# sysexits.h codes used by Lox tooling
EXIT_OK = 0
EXIT_DATAERR = 65
EXIT_NOINPUT = 66
EXIT_SOFTWARE = 70


class RunResult(BaseModel):
    """Outcome of running one unit of source."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    output: str | None = Field(default=None, description="Printed value or tree")
    diagnostics: list[LexicalDiagnostic] = Field(default_factory=list)
    error: LoxiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        if isinstance(self.error, ParseError):
            return EXIT_DATAERR
        if isinstance(self.error, RuntimeTypeError):
            return EXIT_SOFTWARE
        return EXIT_OK


def run_source(source: str, pretty: bool = False, file: Path | None = None) -> RunResult:
    """Scan, parse, and evaluate (or pretty-print) source text.

    Parse and type errors are captured on the result rather than raised so a
    REPL can report them and carry on.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    result = RunResult(diagnostics=scanner.diagnostics)

    try:
        expr = parse(tokens, file)
        if pretty:
            result.output = print_expr(expr)
        else:
            result.output = format_value(evaluate(expr))
    except LoxiError as e:
        if file is not None and e.context is not None and e.context.file is None:
            e.context.file = file
        logger.debug("Run failed: %s", e.message)
        result.error = e

    return result
