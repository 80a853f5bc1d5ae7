# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import typer

from .commands import register_commands

app = typer.Typer(
    help="Classify, parse and group rclone flags into template sections.",
    no_args_is_help=True,
    add_completion=False,
)
register_commands(app)

__all__ = ["app"]
