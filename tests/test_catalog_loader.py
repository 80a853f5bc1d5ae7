# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for option catalog loading and descriptor models."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from rcflags.catalog import (
    CatalogIntegrityError,
    CatalogValidationError,
    OptionCatalog,
    OptionCatalogLoader,
    OptionDescriptor,
)
from rcflags.catalog.checksum import compute_catalog_checksum


def test_loader_skips_malformed_and_duplicate_entries(options_payload: dict[str, Any]) -> None:
    report = OptionCatalogLoader().load_with_report(options_payload)

    assert len(report.skipped) == 3
    assert any("'Name'" in reason for reason in report.skipped)
    assert any("'Type'" in reason for reason in report.skipped)
    assert any("duplicate option 'retries'" in reason for reason in report.skipped)

    retries = report.catalog.find("main", "retries")
    assert retries is not None
    assert retries.groups == ("Config",)


def test_loader_warns_about_skipped_entries(
    options_payload: dict[str, Any],
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level("WARNING", logger="rcflags.catalog.loader"):
        OptionCatalogLoader().from_payload(options_payload)
    assert sum("skipping catalog entry" in record.getMessage() for record in caplog.records) == 3


def test_catalog_keeps_subsystem_order(catalog: OptionCatalog) -> None:
    assert catalog.subsystems[:4] == ("main", "vfs", "filter", "mount")
    assert "proxy" in catalog.subsystems


def test_hidden_options_are_not_visible(catalog: OptionCatalog) -> None:
    names = [descriptor.name for descriptor in catalog.descriptors("main")]
    assert "internal_debug" in names
    assert catalog.find("main", "internal_debug") is None
    assert not catalog.contains("main", "internal_debug")
    assert all(descriptor.name != "internal_debug" for descriptor in catalog.visible("main"))


def test_unknown_subsystem_is_empty(catalog: OptionCatalog) -> None:
    assert catalog.descriptors("nonexistent") == ()
    assert catalog.visible("nonexistent") == ()
    assert catalog.find("nonexistent", "dry_run") is None


def test_descriptor_fields(catalog: OptionCatalog) -> None:
    bwlimit = catalog.find("main", "bwlimit")
    assert bwlimit is not None
    assert bwlimit.title == "Bandwidth limit in KiB/s, or use suffix B|K|M|G|T|P or a full timetable."
    assert bwlimit.details == "See the documentation for the timetable syntax."
    assert bwlimit.option_type == "string"
    assert bwlimit.default is None
    assert bwlimit.default_text == "off"
    assert bwlimit.flag == "--bwlimit"

    dry_run = catalog.find("main", "dry_run")
    assert dry_run is not None
    assert dry_run.flag == "--dry-run"
    assert dry_run.option_type == "boolean"
    assert dry_run.groups == ("Config", "Important")
    assert dry_run.has_group("Important")
    assert not dry_run.has_group("Copy")
    assert dry_run.details == ""


@pytest.mark.parametrize(
    ("subsystem", "name", "expected"),
    [
        ("main", "retries", "numeric"),
        ("main", "max_delete", "numeric"),
        ("main", "fast_list", "boolean"),
        ("main", "config_password", "password"),
        ("main", "buffer_size", "string"),
        ("vfs", "vfs_cache_mode", "string"),
    ],
)
def test_option_type_mapping(catalog: OptionCatalog, subsystem: str, name: str, expected: str) -> None:
    descriptor = catalog.find(subsystem, name)
    assert descriptor is not None
    assert descriptor.option_type == expected


def test_groups_accept_arrays(catalog: OptionCatalog) -> None:
    buffer_size = catalog.find("main", "buffer_size")
    assert buffer_size is not None
    assert buffer_size.groups == ("Performance",)


def test_descriptor_names_are_lower_cased() -> None:
    descriptor = OptionDescriptor.from_mapping(
        {"Name": "Dry_Run", "Type": "bool", "Groups": " Copy , ,Sync "},
        context="test",
    )
    assert descriptor.name == "dry_run"
    assert descriptor.groups == ("Copy", "Sync")
    assert descriptor.hidden is False
    assert descriptor.help == ""


def test_descriptor_rejects_non_boolean_flags() -> None:
    with pytest.raises(CatalogIntegrityError, match="IsPassword"):
        OptionDescriptor.from_mapping({"Name": "x", "Type": "string", "IsPassword": "yes"}, context="test")


def test_catalog_rejects_duplicate_descriptors() -> None:
    descriptor = OptionDescriptor(name="dry_run", groups=(), help="", option_type="boolean", hidden=False)
    with pytest.raises(CatalogIntegrityError, match="dry_run"):
        OptionCatalog(_subsystems={"main": (descriptor, descriptor)})


def test_catalog_is_read_only(catalog: OptionCatalog) -> None:
    with pytest.raises(TypeError):
        catalog._subsystems["main"] = ()  # type: ignore[index]


def test_empty_catalog() -> None:
    empty = OptionCatalog.empty()
    assert len(empty) == 0
    assert empty.subsystems == ()


def test_schema_rejects_non_array_subsystem() -> None:
    with pytest.raises(CatalogValidationError, match="main"):
        OptionCatalogLoader().from_payload({"main": "oops"})


def test_non_object_entries_are_skipped(options_payload: dict[str, Any]) -> None:
    options_payload["main"].append(None)
    options_payload["vfs"].insert(0, "vfs_cache_mode")

    report = OptionCatalogLoader().load_with_report(options_payload)

    assert "options/info.main[18]: expected an option object" in report.skipped
    assert "options/info.vfs[0]: expected an option object" in report.skipped
    assert report.catalog.contains("main", "dry_run")
    assert report.catalog.contains("vfs", "vfs_cache_mode")


def test_unvalidated_loader_still_checks_structure() -> None:
    loader = OptionCatalogLoader(validate=False)
    with pytest.raises(CatalogValidationError, match="expected 'main' to be an array"):
        loader.from_payload({"main": "oops"})

    report = loader.load_with_report({"main": [1, {"Name": "dry_run", "Type": "bool"}]})
    assert report.skipped == ("options/info.main[0]: expected an option object",)
    assert report.catalog.contains("main", "dry_run")


def test_load_path_reads_document(options_info_path: Path) -> None:
    catalog = OptionCatalogLoader().load_path(options_info_path)
    assert catalog.contains("vfs", "vfs_cache_mode")
    assert catalog.checksum


def test_load_path_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        OptionCatalogLoader().load_path(tmp_path / "missing.json")


def test_load_path_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogValidationError, match="failed to parse"):
        OptionCatalogLoader().load_path(path)


def test_load_path_rejects_array_root(tmp_path: Path) -> None:
    path = tmp_path / "array.json"
    path.write_text(json.dumps([{"Name": "dry_run"}]), encoding="utf-8")
    with pytest.raises(CatalogValidationError, match="expected a JSON object"):
        OptionCatalogLoader().load_path(path)


def test_checksum_is_order_independent(options_payload: dict[str, Any]) -> None:
    reordered = dict(reversed(list(options_payload.items())))
    assert compute_catalog_checksum(options_payload) == compute_catalog_checksum(reordered)

    options_payload["main"] = options_payload["main"][:-1]
    assert compute_catalog_checksum(options_payload) != compute_catalog_checksum(reordered)
