"""
loxi CLI - entry point.

Two modes, both built on :func:`loxi.core.session.run_source`:

- ``loxi --file script.lox``: run a whole file once and exit
- ``loxi``: read-evaluate-print loop until the exit word or end of input

``--pretty`` prints the parsed tree instead of evaluating it.
"""

from __future__ import annotations

import logging
import platform
import tomllib
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from loxi._version import get_version
from loxi.core.config import LogLevel, LoxiConfig, load_config
from loxi.core.session import EXIT_NOINPUT, RunResult, run_source

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(
    help="Scan, parse and evaluate Lox expressions.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"loxi version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("loxi").setLevel(level.value)


def _report(result: RunResult) -> None:
    """Print diagnostics and errors to stderr, the output to stdout."""
    for diagnostic in result.diagnostics:
        err_console.print(f"[yellow]{escape(diagnostic.format())}[/yellow]")
    if result.error is not None:
        err_console.print(f"[red]{escape(str(result.error))}[/red]")
    elif result.output is not None:
        typer.echo(result.output)


def run_file(path: Path, pretty: bool) -> int:
    """Run a whole file as one unit of source; returns the exit status."""
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        err_console.print(
            f"[red]Cannot decode {escape(str(path))} as UTF-8: {escape(str(e))}[/red]"
        )
        return EXIT_NOINPUT
    except OSError as e:
        err_console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(e))}[/red]")
        return EXIT_NOINPUT

    result = run_source(source, pretty=pretty, file=path)
    _report(result)
    return result.exit_code


def run_prompt(config: LoxiConfig, pretty: bool) -> None:
    """Read lines until the exit word or end of input; errors do not stop the loop."""
    while True:
        try:
            line = input(config.prompt)
        except EOFError:
            typer.echo()
            break

        line = line.strip()
        if config.is_exit(line):
            break
        if not line:
            continue

        _report(run_source(line, pretty=pretty))


def _load_config(config_path: Path | None) -> LoxiConfig:
    try:
        return load_config(config_path)
    except FileNotFoundError:
        err_console.print(f"[red]Config file not found: {escape(str(config_path))}[/red]")
    except tomllib.TOMLDecodeError as e:
        err_console.print(f"[red]Invalid TOML in config: {escape(str(e))}[/red]")
    except ValidationError as e:
        err_console.print(f"[red]Invalid configuration:[/red]\n{escape(str(e))}")
    raise typer.Exit(code=2)


@app.command()
def main_command(
    file: Path | None = typer.Option(  # noqa: B008
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Run a source file instead of starting the REPL.",
    ),
    pretty: bool | None = typer.Option(
        None,
        "--pretty/--no-pretty",
        "-p",
        help="Print the parsed tree instead of evaluating it.",
    ),
    config_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Config file (default: ./loxi.toml when present).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
) -> None:
    """Evaluate Lox expressions from a file or an interactive prompt."""
    config = _load_config(config_path)
    _configure_logging(LogLevel.DEBUG if verbose else config.log_level)

    use_pretty = config.pretty if pretty is None else pretty
    logger.debug("Starting (file=%s, pretty=%s)", file, use_pretty)

    if file is not None:
        code = run_file(file, use_pretty)
        if code:
            raise typer.Exit(code=code)
        return

    run_prompt(config, use_pretty)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
