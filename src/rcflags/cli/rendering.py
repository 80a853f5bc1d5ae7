# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderables used by the CLI commands."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich import box
from rich.table import Table
from rich.text import Text

from ..catalog.model_options import OptionDescriptor
from ..catalog.types import FlagValue
from ..flags.taxonomy import FlagCategory


def format_value(value: FlagValue) -> str:
    """Return a compact human-readable rendering of a flag value."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(value) if value else "[]"
    return str(value)


def build_values_table(title: str, values: Mapping[str, FlagValue]) -> Table:
    """Return a two-column table of flag names and values."""

    table = Table(title=title, box=box.SIMPLE, expand=False)
    table.add_column("Flag", style="bold")
    table.add_column("Value", overflow="fold")
    for name, value in values.items():
        table.add_row(Text(name), Text(format_value(value)))
    return table


def build_classification_table(results: Mapping[str, FlagCategory | None]) -> Table:
    """Return a table mapping each requested flag to its category."""

    table = Table(title="Classification", box=box.SIMPLE)
    table.add_column("Flag", style="bold")
    table.add_column("Category")
    for flag, category in results.items():
        table.add_row(Text(flag), category.value if category is not None else "-")
    return table


def build_categories_table(categories: Iterable[FlagCategory]) -> Table:
    """Return a table listing the category taxonomy."""

    table = Table(title="Categories", box=box.SIMPLE)
    table.add_column("Category", style="bold")
    table.add_column("Serve variant")
    for category in categories:
        table.add_row(category.value, category.serve_variant or "-")
    return table


def build_options_table(title: str, descriptors: Iterable[OptionDescriptor]) -> Table:
    """Return a table describing catalog options."""

    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("Flag", style="bold", no_wrap=True)
    table.add_column("Type")
    table.add_column("Default", overflow="fold")
    table.add_column("Description", overflow="fold")
    for descriptor in descriptors:
        table.add_row(
            descriptor.flag,
            descriptor.option_type,
            Text(descriptor.default_text or "-"),
            Text(descriptor.title or "-"),
        )
    return table


__all__ = [
    "build_categories_table",
    "build_classification_table",
    "build_options_table",
    "build_values_table",
    "format_value",
]
