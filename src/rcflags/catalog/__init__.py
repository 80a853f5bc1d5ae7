# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the option catalog."""

from __future__ import annotations

from typing import Final

from .errors import CatalogIntegrityError, CatalogValidationError, TemplateDecodeError
from .loader import CatalogLoadReport, OptionCatalogLoader
from .metadata import clear_catalog_cache, load_catalog_cached
from .model_catalog import OptionCatalog
from .model_options import OptionDescriptor, OptionType
from .types import FlagMapping, FlagValue

__all__: Final[tuple[str, ...]] = (
    "CatalogIntegrityError",
    "CatalogLoadReport",
    "CatalogValidationError",
    "FlagMapping",
    "FlagValue",
    "OptionCatalog",
    "OptionCatalogLoader",
    "OptionDescriptor",
    "OptionType",
    "TemplateDecodeError",
    "clear_catalog_cache",
    "load_catalog_cached",
)
