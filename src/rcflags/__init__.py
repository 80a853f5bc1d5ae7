# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Classify rclone option names and turn command lines into grouped template sections."""

from __future__ import annotations

from .catalog import (
    CatalogIntegrityError,
    CatalogValidationError,
    OptionCatalog,
    OptionCatalogLoader,
    OptionDescriptor,
    TemplateDecodeError,
)
from .flags import (
    FLAG_CATEGORIES,
    SERVE_VARIANTS,
    FlagCategory,
    GroupedFlags,
    classify,
    flatten_grouped,
    group_flags,
    import_command,
    normalize_flag_name,
    parse_command,
)

__all__ = [
    "CatalogIntegrityError",
    "CatalogValidationError",
    "FLAG_CATEGORIES",
    "FlagCategory",
    "GroupedFlags",
    "OptionCatalog",
    "OptionCatalogLoader",
    "OptionDescriptor",
    "SERVE_VARIANTS",
    "TemplateDecodeError",
    "classify",
    "flatten_grouped",
    "group_flags",
    "import_command",
    "normalize_flag_name",
    "parse_command",
]
