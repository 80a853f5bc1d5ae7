# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``options`` command listing the catalog options offered per section."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...catalog.views import SECTION_NAMES, section_options
from ..rendering import build_options_table
from ..shared import (
    CatalogOption,
    CLIError,
    JsonOption,
    NoColorOption,
    NoEmojiOption,
    RootOption,
    build_context,
)


def options_command(
    section: Annotated[
        str,
        typer.Argument(help=f"One of {', '.join(SECTION_NAMES)} or serve.<variant>."),
    ],
    catalog: CatalogOption = None,
    root: RootOption = Path("."),
    output_json: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """List the options available for a template section."""

    try:
        context = build_context(root, no_color=no_color, no_emoji=no_emoji)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    try:
        option_catalog = context.load_catalog(catalog)
        try:
            descriptors = section_options(option_catalog, section)
        except ValueError as exc:
            raise CLIError(str(exc)) from exc
    except CLIError as exc:
        context.logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    if output_json:
        context.logger.echo_json([descriptor.name for descriptor in descriptors], indent=context.config.json_indent)
        return
    if not descriptors:
        context.logger.info(f"No options offered for section '{section}'.")
        return
    context.logger.console.print(build_options_table(section, descriptors))


def register(app: typer.Typer) -> None:
    """Register the options command with ``app``."""

    app.command(name="options")(options_command)


__all__ = ["options_command", "register"]
