# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading option catalog JSON documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import CatalogValidationError
from .types import JSONValue


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Load an ``options/info`` JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogValidationError: If the document cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogValidationError(f"{path}: failed to parse catalog JSON: {exc.msg}") from exc
    if not isinstance(payload, Mapping):
        raise CatalogValidationError(f"{path}: expected a JSON object")
    return payload


__all__ = ["load_document"]
