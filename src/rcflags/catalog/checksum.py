# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for option catalog payloads."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping

from .types import JSONValue
from .utils import thaw_json_value


def compute_catalog_checksum(payload: Mapping[str, JSONValue]) -> str:
    """Calculate a deterministic checksum for an ``options/info`` payload.

    Args:
        payload: Raw catalog payload keyed by subsystem identifier.

    Returns:
        str: Hex-encoded SHA-256 checksum of the canonical JSON encoding.
    """
    canonical = json.dumps(
        thaw_json_value(payload),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


__all__ = ["compute_catalog_checksum"]
