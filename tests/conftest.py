# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from rcflags.catalog import OptionCatalog, OptionCatalogLoader, clear_catalog_cache

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def options_info_path() -> Path:
    """Return the saved ``options/info`` response used across tests."""
    return FIXTURES_ROOT / "options_info.json"


@pytest.fixture
def options_payload(options_info_path: Path) -> dict[str, Any]:
    """Return a fresh copy of the saved ``options/info`` payload."""
    return json.loads(options_info_path.read_text(encoding="utf-8"))


@pytest.fixture
def catalog(options_payload: dict[str, Any]) -> OptionCatalog:
    """Return the catalog snapshot built from the saved payload."""
    return OptionCatalogLoader().from_payload(options_payload)


@pytest.fixture
def catalog_file(tmp_path: Path, options_info_path: Path) -> Path:
    """Return a writable copy of the saved payload inside ``tmp_path``."""
    target = tmp_path / "options_info.json"
    shutil.copyfile(options_info_path, target)
    return target


@pytest.fixture(autouse=True)
def _isolated_catalog_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep cached snapshots and catalog overrides from leaking between tests."""
    monkeypatch.delenv("RCFLAGS_CATALOG", raising=False)
    clear_catalog_cache()
    yield
    clear_catalog_cache()
