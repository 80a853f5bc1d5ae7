# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Flag classification, command parsing and category grouping."""

from __future__ import annotations

from typing import Final

from .classifier import classify, classify_many, normalize_flag_name, unclassified
from .grouping import GroupedFlags, flatten_grouped, group_flags, import_command
from .parser import coerce_value, parse_command
from .taxonomy import FLAG_CATEGORIES, SERVE_VARIANTS, FlagCategory

__all__: Final[tuple[str, ...]] = (
    "FLAG_CATEGORIES",
    "FlagCategory",
    "GroupedFlags",
    "SERVE_VARIANTS",
    "classify",
    "classify_many",
    "coerce_value",
    "flatten_grouped",
    "group_flags",
    "import_command",
    "normalize_flag_name",
    "parse_command",
    "unclassified",
)
