# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for grouping flags into template sections."""

from __future__ import annotations

import logging

import pytest

from rcflags.catalog import OptionCatalog
from rcflags.flags import (
    FLAG_CATEGORIES,
    FlagCategory,
    GroupedFlags,
    flatten_grouped,
    group_flags,
    import_command,
)


def test_group_flags_partitions_by_category(catalog: OptionCatalog) -> None:
    grouped = group_flags({"vfs_cache_mode": "full", "dry_run": True}, catalog)

    assert grouped.section(FlagCategory.VFS) == {"vfs_cache_mode": "full"}
    assert grouped.section(FlagCategory.CONFIG) == {"dry_run": True}
    assert sum(grouped.counts().values()) == 2
    assert [category for category, _ in grouped.non_empty()] == [FlagCategory.CONFIG, FlagCategory.VFS]


def test_every_category_is_present(catalog: OptionCatalog) -> None:
    grouped = group_flags({}, catalog)
    assert tuple(grouped.sections) == FLAG_CATEGORIES
    assert grouped.is_empty
    assert grouped == GroupedFlags.empty()


def test_unclassifiable_flags_are_dropped(catalog: OptionCatalog, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rcflags.flags.grouping"):
        grouped = group_flags({"bogus": 1, "internal_debug": True, "exclude": ["*.tmp"]}, catalog)
    assert grouped.flatten() == {"exclude": ["*.tmp"]}
    assert any("bogus" in record.getMessage() for record in caplog.records)


def test_caller_spelling_is_preserved(catalog: OptionCatalog) -> None:
    grouped = group_flags({"--dry-run": True, "vfs-cache-mode": "writes"}, catalog)
    assert grouped.section(FlagCategory.CONFIG) == {"--dry-run": True}
    assert grouped.section(FlagCategory.VFS) == {"vfs-cache-mode": "writes"}


def test_serve_sections_stay_separate(catalog: OptionCatalog) -> None:
    grouped = group_flags({"addr": [":8080"], "etag_hash": "MD5", "key": "id_rsa"}, catalog)
    assert grouped.serve("http") == {"addr": [":8080"]}
    assert grouped.serve("webdav") == {"etag_hash": "MD5"}
    assert grouped.serve("sftp") == {"key": "id_rsa"}
    assert grouped.merged_serve() == {"addr": [":8080"], "etag_hash": "MD5", "key": "id_rsa"}


def test_unknown_serve_variant_raises() -> None:
    with pytest.raises(ValueError):
        GroupedFlags.empty().serve("gopher")


def test_merged_serve_later_variant_wins() -> None:
    grouped = GroupedFlags(
        sections={
            FlagCategory.SERVE_HTTP: {"addr": ":8080"},
            FlagCategory.SERVE_DOCKER: {"addr": ":9000"},
        },
    )
    assert grouped.merged_serve() == {"addr": ":9000"}


def test_grouping_is_idempotent(catalog: OptionCatalog) -> None:
    flags = {
        "dry_run": True,
        "ignore_existing": True,
        "delete_excluded": True,
        "vfs_cache_mode": "full",
        "exclude": ["*.tmp"],
        "allow_other": True,
        "addr": [":8080"],
        "etag_hash": "MD5",
    }
    grouped = group_flags(flags, catalog)
    flat = flatten_grouped(grouped)
    assert flat == flags
    assert group_flags(flat, catalog) == grouped


def test_flatten_orders_serve_last(catalog: OptionCatalog) -> None:
    grouped = group_flags({"addr": ":8080", "exclude": "*.tmp", "dry_run": True}, catalog)
    assert list(grouped.flatten()) == ["dry_run", "exclude", "addr"]


def test_sections_are_read_only(catalog: OptionCatalog) -> None:
    grouped = group_flags({"dry_run": True}, catalog)
    with pytest.raises(TypeError):
        grouped.sections[FlagCategory.CONFIG]["dry_run"] = False  # type: ignore[index]

    copy = grouped.section(FlagCategory.CONFIG)
    copy["dry_run"] = False
    assert grouped.section(FlagCategory.CONFIG) == {"dry_run": True}


def test_input_mapping_is_not_retained(catalog: OptionCatalog) -> None:
    flags = {"dry_run": True}
    grouped = group_flags(flags, catalog)
    flags["dry_run"] = False
    assert grouped.section(FlagCategory.CONFIG) == {"dry_run": True}


def test_overlay_merges_sections() -> None:
    base = GroupedFlags(
        sections={
            FlagCategory.CONFIG: {"dry_run": True, "transfers": 4},
            FlagCategory.VFS: {"vfs_cache_mode": "off"},
        },
    )
    template = GroupedFlags(sections={FlagCategory.CONFIG: {"transfers": 16}})

    merged = base.overlay(template)
    assert merged.section(FlagCategory.CONFIG) == {"dry_run": True, "transfers": 16}
    assert merged.section(FlagCategory.VFS) == {"vfs_cache_mode": "off"}
    assert base.section(FlagCategory.CONFIG) == {"dry_run": True, "transfers": 4}


def test_overlay_replaces_non_empty_sections() -> None:
    base = GroupedFlags(
        sections={
            FlagCategory.CONFIG: {"dry_run": True, "transfers": 4},
            FlagCategory.VFS: {"vfs_cache_mode": "off"},
        },
    )
    template = GroupedFlags(sections={FlagCategory.CONFIG: {"transfers": 16}})

    replaced = base.overlay(template, merge=False)
    assert replaced.section(FlagCategory.CONFIG) == {"transfers": 16}
    assert replaced.section(FlagCategory.VFS) == {"vfs_cache_mode": "off"}


def test_import_command(catalog: OptionCatalog) -> None:
    grouped = import_command(
        "rclone mount remote: /mnt --vfs-cache-mode full --allow-other --transfers 8 --nonsense",
        catalog,
    )
    assert grouped.section(FlagCategory.VFS) == {"vfs_cache_mode": "full"}
    assert grouped.section(FlagCategory.MOUNT) == {"allow_other": True}
    assert grouped.section(FlagCategory.CONFIG) == {"transfers": 8}
    assert "nonsense" not in grouped.flatten()


def test_import_command_without_flags(catalog: OptionCatalog) -> None:
    assert import_command("rclone lsd remote:", catalog).is_empty
