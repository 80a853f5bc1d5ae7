# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cached access to option catalog snapshots stored on disk."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from .errors import CatalogValidationError
from .loader import OptionCatalogLoader
from .model_catalog import OptionCatalog

LOGGER = logging.getLogger(__name__)


def load_catalog_cached(path: Path) -> OptionCatalog:
    """Return the catalog stored at ``path``, reusing a cached snapshot.

    The cache key includes the file modification time, so rewriting the
    document yields a fresh snapshot on the next call.

    Args:
        path: Location of a saved ``options/info`` response.

    Returns:
        OptionCatalog: Immutable catalog snapshot.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogValidationError: If the document is not a valid payload.

    """
    resolved = path.expanduser().resolve()
    if not resolved.exists():
        raise FileNotFoundError(resolved)
    return _load_snapshot(resolved, resolved.stat().st_mtime_ns)


def clear_catalog_cache() -> None:
    """Clear cached snapshots to force a reload on next access."""
    _load_snapshot.cache_clear()


@lru_cache(maxsize=8)
def _load_snapshot(path: Path, mtime_ns: int) -> OptionCatalog:
    """Load the snapshot for ``path`` at modification time ``mtime_ns``."""
    del mtime_ns
    try:
        catalog = OptionCatalogLoader().load_path(path)
    except (CatalogValidationError, OSError) as exc:
        LOGGER.warning("catalog snapshot load failed: %s", exc)
        raise
    LOGGER.debug("cached option catalog path=%s checksum=%s", path, catalog.checksum[:12])
    return catalog


__all__ = ("clear_catalog_cache", "load_catalog_cached")
