# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``parse`` command turning a command line into typed flag values."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...flags.parser import parse_command
from ..rendering import build_values_table
from ..shared import CLIError, JsonOption, NoColorOption, NoEmojiOption, RootOption, build_context


def parse_cli_command(
    command: Annotated[str, typer.Argument(help="Command line, e.g. 'rclone copy a: b: --dry-run'.")],
    root: RootOption = Path("."),
    output_json: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Print the flags found in a command line with their coerced values."""

    try:
        context = build_context(root, no_color=no_color, no_emoji=no_emoji)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    flags = parse_command(command)
    if output_json:
        context.logger.echo_json(flags, indent=context.config.json_indent)
        return
    if not flags:
        context.logger.warn("No flags found.")
        return
    context.logger.console.print(build_values_table("Flags", flags))
    count = len(flags)
    context.logger.ok(f"{count} flag{'' if count == 1 else 's'} parsed")


def register(app: typer.Typer) -> None:
    """Register the parse command with ``app``."""

    app.command(name="parse")(parse_cli_command)


__all__ = ["parse_cli_command", "register"]
