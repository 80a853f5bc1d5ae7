# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``classify`` command resolving the category of individual flags."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...flags.classifier import classify_many
from ..rendering import build_classification_table
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


def classify_command(
    flags: Annotated[list[str], typer.Argument(help="Flag names, e.g. --dry-run or vfs_cache_mode.")],
    catalog: CatalogOption = None,
    root: RootOption = Path("."),
    strict: StrictOption = None,
    output_json: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Print the category owning each flag."""

    try:
        context = build_context(root, no_color=no_color, no_emoji=no_emoji)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    try:
        option_catalog = context.load_catalog(catalog)
    except CLIError as exc:
        context.logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    results = classify_many(flags, option_catalog)
    if output_json:
        payload = {flag: category.value if category is not None else None for flag, category in results.items()}
        context.logger.echo_json(payload, indent=context.config.json_indent)
    else:
        context.logger.console.print(build_classification_table(results))

    missing = [flag for flag, category in results.items() if category is None]
    strict_mode = context.config.strict if strict is None else strict
    if missing and strict_mode:
        if not output_json:
            context.logger.fail(f"Unclassifiable flags: {', '.join(missing)}")
        raise typer.Exit(code=STRICT_EXIT_CODE)


def register(app: typer.Typer) -> None:
    """Register the classify command with ``app``."""

    app.command(name="classify")(classify_command)


__all__ = ["classify_command", "register"]
