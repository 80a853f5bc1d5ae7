# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the flag category taxonomy."""

from __future__ import annotations

import pytest

from rcflags.flags import FLAG_CATEGORIES, SERVE_VARIANTS, FlagCategory
from rcflags.flags.taxonomy import SERVE_CATEGORIES


def test_serve_categories_follow_variant_order() -> None:
    assert tuple(category.serve_variant for category in SERVE_CATEGORIES) == SERVE_VARIANTS
    assert FLAG_CATEGORIES[-len(SERVE_CATEGORIES) :] == SERVE_CATEGORIES


def test_serve_properties() -> None:
    assert FlagCategory.SERVE_WEBDAV.is_serve
    assert FlagCategory.SERVE_WEBDAV.serve_variant == "webdav"
    assert not FlagCategory.MOUNT.is_serve
    assert FlagCategory.MOUNT.serve_variant is None


def test_for_serve_variant() -> None:
    assert FlagCategory.for_serve_variant("restic") is FlagCategory.SERVE_RESTIC
    with pytest.raises(ValueError):
        FlagCategory.for_serve_variant("gopher")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("copy", FlagCategory.COPY),
        (" Serve.S3 ", FlagCategory.SERVE_S3),
        ("serve", None),
        ("backend", None),
    ],
)
def test_from_raw(raw: str, expected: FlagCategory | None) -> None:
    assert FlagCategory.from_raw(raw) is expected


def test_categories_are_strings() -> None:
    assert FlagCategory.CONFIG == "config"
    assert FlagCategory("serve.nfs") is FlagCategory.SERVE_NFS
