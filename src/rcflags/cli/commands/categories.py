# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``categories`` command listing the flag taxonomy."""

from __future__ import annotations

from pathlib import Path

import typer

from ...flags.taxonomy import FLAG_CATEGORIES
from ..rendering import build_categories_table
from ..shared import CLIError, JsonOption, NoColorOption, NoEmojiOption, RootOption, build_context


def categories_command(
    root: RootOption = Path("."),
    output_json: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """List every category a flag can be filed under."""

    try:
        context = build_context(root, no_color=no_color, no_emoji=no_emoji)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    if output_json:
        context.logger.echo_json([category.value for category in FLAG_CATEGORIES], indent=context.config.json_indent)
        return
    context.logger.console.print(build_categories_table(FLAG_CATEGORIES))


def register(app: typer.Typer) -> None:
    """Register the categories command with ``app``."""

    app.command(name="categories")(categories_command)


__all__ = ["categories_command", "register"]
