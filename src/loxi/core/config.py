"""
Driver configuration models.

Parses the [loxi] section from loxi.toml and provides typed configuration
for the REPL and file runner.
"""

from __future__ import annotations

import logging
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "loxi.toml"


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoxiConfig(BaseModel):
    """Complete driver configuration."""

    model_config = ConfigDict(extra="forbid")

    prompt: str = Field(default="> ", description="REPL prompt")
    exit_command: str = Field(
        default="exit", min_length=1, description="Word that ends the REPL (any case)"
    )
    pretty: bool = Field(default=False, description="Print the tree instead of evaluating")
    log_level: LogLevel = LogLevel.WARNING

    def is_exit(self, line: str) -> bool:
        return line.strip().lower() == self.exit_command.lower()


def load_config_from_toml(data: dict[str, Any]) -> LoxiConfig:
    """Build a LoxiConfig from parsed TOML data (the [loxi] table)."""
    return LoxiConfig.model_validate(data.get("loxi", {}))


def load_config(path: Path | None = None) -> LoxiConfig:
    """
    Load configuration from a TOML file.

    Args:
        path: Config file; defaults to loxi.toml in the current directory.
            A missing default file yields the default configuration.

    Raises:
        FileNotFoundError: If an explicitly given path does not exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If the [loxi] table has invalid values.
    """
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not path.exists():
            return LoxiConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)
    logger.debug("Loaded configuration from %s", path)
    return load_config_from_toml(data)
