# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for template section JSON helpers."""

from __future__ import annotations

import json

import pytest

from rcflags.catalog import OptionCatalog, TemplateDecodeError
from rcflags.flags import group_flags
from rcflags.flags.serialization import (
    DISPLAY_SECTIONS,
    combine_sections,
    display_sections,
    dump_grouped,
    dump_section,
    json_key_count,
    load_section,
    options_subtitle,
    replace_smart_quotes,
)


def test_replace_smart_quotes() -> None:
    assert replace_smart_quotes("{“dry_run”: ‘x’}") == "{\"dry_run\": 'x'}"
    assert replace_smart_quotes("plain") == "plain"


def test_load_section_accepts_smart_quotes() -> None:
    assert load_section("{“vfs_cache_mode”: “full”}") == {"vfs_cache_mode": "full"}


def test_dump_section_uses_indent() -> None:
    text = dump_section({"transfers": 4})
    assert text == '{\n  "transfers": 4\n}'
    assert dump_section({}, indent=0) == "{}"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("{not json", "invalid JSON"),
        ("[1, 2]", "expected a JSON object"),
        ('{"nested": {"a": 1}}', "unsupported value for 'nested'"),
        ('{"mixed": ["a", 1]}', "unsupported value for 'mixed'"),
    ],
)
def test_load_section_rejects_invalid_text(text: str, message: str) -> None:
    with pytest.raises(TemplateDecodeError, match=message):
        load_section(text)


def test_combine_sections_later_wins() -> None:
    combined = combine_sections(['{"transfers": 4, "dry_run": true}', "{}", '{"transfers": 8}'])
    assert combined == {"transfers": 8, "dry_run": True}


def test_combine_sections_reports_failing_index() -> None:
    with pytest.raises(TemplateDecodeError, match="section 1"):
        combine_sections(['{"transfers": 4}', "{oops"])


def test_display_sections_merge_serve(catalog: OptionCatalog) -> None:
    grouped = group_flags({"addr": ":8080", "etag_hash": "MD5", "allow_other": True}, catalog)
    sections = display_sections(grouped)
    assert tuple(sections) == DISPLAY_SECTIONS
    assert sections["serve"] == {"addr": ":8080", "etag_hash": "MD5"}
    assert sections["mount"] == {"allow_other": True}
    assert sections["copy"] == {}


def test_dump_grouped_round_trips_through_combine(catalog: OptionCatalog) -> None:
    flags = {"dry_run": True, "exclude": ["*.tmp"], "vfs_cache_mode": "full", "addr": [":8080"]}
    grouped = group_flags(flags, catalog)
    blobs = dump_grouped(grouped)
    assert json.loads(blobs["vfs"]) == {"vfs_cache_mode": "full"}
    assert group_flags(combine_sections(blobs.values()), catalog) == grouped


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('{"a": 1, "b": 2}', 2),
        ("{}", 0),
        ("", 0),
        ("{broken", 0),
        ("[1]", 0),
    ],
)
def test_json_key_count(text: str, expected: int) -> None:
    assert json_key_count(text) == expected


def test_options_subtitle() -> None:
    assert options_subtitle(0) is None
    assert options_subtitle(1) == "1 option set"
    assert options_subtitle(3) == "3 options set"
