# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``group`` command splitting flags into template sections."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...catalog.errors import TemplateDecodeError
from ...catalog.types import FlagMapping
from ...flags.classifier import unclassified
from ...flags.grouping import group_flags
from ...flags.parser import parse_command
from ...flags.serialization import display_sections, load_section
from ...logging import section as render_section
from ..rendering import build_values_table
from ..shared import (
    STRICT_EXIT_CODE,
    CatalogOption,
    CLIError,
    JsonOption,
    NoColorOption,
    NoEmojiOption,
    RootOption,
    StrictOption,
    build_context,
)

TemplateOption = Annotated[
    Path | None,
    typer.Option("--template", "-t", help="Flat JSON object of stored template options."),
]


def _read_flags(command: str | None, template: Path | None) -> FlagMapping:
    """Return the flat flag mapping from a command line or a template file.

    Raises:
        CLIError: If neither or both sources are given, or the template is unreadable.
    """

    if (command is None) == (template is None):
        raise CLIError("Provide exactly one of a command line or --template.")
    if template is None:
        return parse_command(command or "")
    try:
        text = template.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"Cannot read template {template}: {exc}") from exc
    try:
        return load_section(text)
    except TemplateDecodeError as exc:
        raise CLIError(f"Invalid template {template}: {exc}") from exc


def group_command(
    command: Annotated[str | None, typer.Argument(help="Command line to import.")] = None,
    template: TemplateOption = None,
    catalog: CatalogOption = None,
    root: RootOption = Path("."),
    strict: StrictOption = None,
    output_json: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Group flags from a command line or stored template by category."""

    try:
        context = build_context(root, no_color=no_color, no_emoji=no_emoji)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    try:
        option_catalog = context.load_catalog(catalog)
        flags = _read_flags(command, template)
    except CLIError as exc:
        context.logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    strict_mode = context.config.strict if strict is None else strict
    missing = unclassified(flags, option_catalog)
    if missing:
        if strict_mode:
            if not output_json:
                context.logger.fail(f"Unclassifiable flags: {', '.join(missing)}")
            raise typer.Exit(code=STRICT_EXIT_CODE)
        if not output_json:
            context.logger.warn(f"Dropped unclassifiable flags: {', '.join(missing)}")

    grouped = group_flags(flags, option_catalog)
    indent = context.config.json_indent
    if output_json:
        context.logger.echo_json(display_sections(grouped), indent=indent)
        return
    if grouped.is_empty:
        context.logger.warn("No classifiable flags found.")
        return
    for name, values in display_sections(grouped).items():
        if not values:
            continue
        render_section(name, use_color=context.logger.use_color)
        context.logger.console.print(build_values_table(name, values))


def register(app: typer.Typer) -> None:
    """Register the group command with ``app``."""

    app.command(name="group")(group_command)


__all__ = ["group_command", "register"]
