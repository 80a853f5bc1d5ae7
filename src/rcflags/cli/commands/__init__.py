# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import categories, classify, group, options, parse

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register built-in CLI commands on ``app``.

    Args:
        app: Typer application receiving command registrations.
    """

    categories.register(app)
    classify.register(app)
    parse.register(app)
    group.register(app)
    options.register(app)
