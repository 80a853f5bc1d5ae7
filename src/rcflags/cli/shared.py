# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared CLI helpers: errors, logger adapter, common options and context."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from ..catalog.errors import CatalogValidationError
from ..catalog.metadata import load_catalog_cached
from ..catalog.model_catalog import OptionCatalog
from ..config import ConfigError, RcflagsConfig, load_config
from ..logging import FAIL, INFO, OK, WARN, MessageKind, emit

STRICT_EXIT_CODE = 2

RootOption = Annotated[
    Path,
    typer.Option("--root", help="Project root used to locate rcflags.toml or pyproject.toml."),
]
CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Saved options/info JSON document."),
]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")]
JsonOption = Annotated[bool, typer.Option("--json", help="Emit machine-readable JSON.")]
StrictOption = Annotated[
    bool | None,
    typer.Option("--strict/--lenient", help="Fail when a flag cannot be classified."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool

    def _emit(self, kind: MessageKind, message: str) -> None:
        emit(kind, message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        self._emit(FAIL, message)

    def warn(self, message: str) -> None:
        self._emit(WARN, message)

    def ok(self, message: str) -> None:
        self._emit(OK, message)

    def info(self, message: str) -> None:
        self._emit(INFO, message)

    def echo_json(self, payload: Any, *, indent: int) -> None:
        """Write ``payload`` to stdout as JSON."""

        typer.echo(json.dumps(payload, indent=indent or None, ensure_ascii=False))


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated Rich console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance for one command invocation.
    """

    console = Console(no_color=no_color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color)


@dataclass(slots=True)
class CommandContext:
    """Configuration and output helpers resolved for one invocation."""

    root: Path
    config: RcflagsConfig
    logger: CLILogger

    def load_catalog(self, override: Path | None) -> OptionCatalog:
        """Return the catalog named on the command line or in configuration.

        Raises:
            CLIError: If no catalog is configured or it cannot be loaded.
        """

        path = override if override is not None else self.config.resolve_catalog(self.root)
        if path is None:
            raise CLIError("No option catalog configured; pass --catalog or set RCFLAGS_CATALOG.")
        try:
            return load_catalog_cached(path)
        except FileNotFoundError as exc:
            raise CLIError(f"Option catalog not found: {path}") from exc
        except CatalogValidationError as exc:
            raise CLIError(f"Invalid option catalog: {exc}") from exc


def build_context(root: Path, *, no_color: bool, no_emoji: bool) -> CommandContext:
    """Load configuration for ``root`` and build the invocation context.

    Command-line switches only ever turn colour or emoji off; configuration
    may turn them off as well.

    Raises:
        CLIError: If configuration loading fails.
    """

    try:
        config = load_config(root)
    except ConfigError as exc:
        logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
        message = f"Failed to load configuration: {exc}"
        logger.fail(message)
        raise CLIError(message) from exc
    logger = build_cli_logger(
        emoji=config.emoji and not no_emoji,
        no_color=no_color or not config.color,
    )
    return CommandContext(root=root, config=config, logger=logger)


__all__ = [
    "CLIError",
    "CLILogger",
    "CatalogOption",
    "CommandContext",
    "JsonOption",
    "NoColorOption",
    "NoEmojiOption",
    "RootOption",
    "STRICT_EXIT_CODE",
    "StrictOption",
    "build_cli_logger",
    "build_context",
]
