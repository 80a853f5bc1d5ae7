# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-section option lists offered when editing a template."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from ..flags.taxonomy import SERVE_VARIANTS, FlagCategory
from .model_catalog import OptionCatalog
from .model_options import OptionDescriptor, sort_by_name
from .types import FILTER_SUBSYSTEM, MAIN_SUBSYSTEM, MOUNT_SUBSYSTEM, VFS_SUBSYSTEM

CONFIG_GROUPS: Final[tuple[str, ...]] = ("Performance", "Listing", "Networking", "Check")
CONFIG_EXTRA_OPTIONS: Final[frozenset[str]] = frozenset({"use_server_modtime"})
METADATA_GROUP: Final[str] = "Metadata"


def config_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return tuning options of the main subsystem offered in the config section."""

    return sort_by_name(
        descriptor
        for descriptor in catalog.visible(MAIN_SUBSYSTEM)
        if any(descriptor.has_group(group) for group in CONFIG_GROUPS) or descriptor.name in CONFIG_EXTRA_OPTIONS
    )


def copy_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return main-subsystem options tagged ``Copy``."""

    return sort_by_name(d for d in catalog.visible(MAIN_SUBSYSTEM) if d.has_group("Copy"))


def sync_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return main-subsystem options tagged ``Copy`` or ``Sync``.

    Sync accepts every copy option, so the sync section offers both.
    """

    return sort_by_name(d for d in catalog.visible(MAIN_SUBSYSTEM) if d.has_group("Copy") or d.has_group("Sync"))


def _without_metadata(catalog: OptionCatalog, subsystem: str) -> tuple[OptionDescriptor, ...]:
    return sort_by_name(d for d in catalog.visible(subsystem) if not d.has_group(METADATA_GROUP))


def filter_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return filter options excluding metadata filters."""

    return _without_metadata(catalog, FILTER_SUBSYSTEM)


def mount_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return mount options excluding metadata options."""

    return _without_metadata(catalog, MOUNT_SUBSYSTEM)


def vfs_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return VFS options excluding metadata options."""

    return _without_metadata(catalog, VFS_SUBSYSTEM)


def serve_options(catalog: OptionCatalog, variant: str) -> tuple[OptionDescriptor, ...]:
    """Return the options of a single serving-backend variant.

    Raises:
        ValueError: If ``variant`` is not a known serving-backend variant.
    """

    if variant not in SERVE_VARIANTS:
        raise ValueError(f"unknown serve variant '{variant}'")
    return sort_by_name(catalog.visible(variant))


def unique_serve_options(catalog: OptionCatalog) -> tuple[OptionDescriptor, ...]:
    """Return the union of serve options; the first variant declaring a name wins."""

    unique: dict[str, OptionDescriptor] = {}
    for variant in SERVE_VARIANTS:
        for descriptor in catalog.visible(variant):
            unique.setdefault(descriptor.name, descriptor)
    return sort_by_name(unique.values())


SERVE_SECTION: Final[str] = "serve"

_SECTION_VIEWS: Final[dict[FlagCategory, Callable[[OptionCatalog], tuple[OptionDescriptor, ...]]]] = {
    FlagCategory.CONFIG: config_options,
    FlagCategory.COPY: copy_options,
    FlagCategory.SYNC: sync_options,
    FlagCategory.FILTER: filter_options,
    FlagCategory.MOUNT: mount_options,
    FlagCategory.VFS: vfs_options,
}


def section_options(catalog: OptionCatalog, section: str) -> tuple[OptionDescriptor, ...]:
    """Return the option list for a display section name.

    Args:
        catalog: Catalog snapshot to read.
        section: One of ``config``, ``copy``, ``sync``, ``filter``, ``mount``,
            ``vfs``, ``serve`` or ``serve.<variant>``.

    Returns:
        tuple[OptionDescriptor, ...]: Options sorted by name.

    Raises:
        ValueError: If ``section`` is not recognised.
    """

    if section.strip().lower() == SERVE_SECTION:
        return unique_serve_options(catalog)
    category = FlagCategory.from_raw(section)
    if category is None:
        raise ValueError(f"unknown option section '{section}'")
    if category.serve_variant is not None:
        return serve_options(catalog, category.serve_variant)
    return _SECTION_VIEWS[category](catalog)


SECTION_NAMES: Final[tuple[str, ...]] = (*(category.value for category in _SECTION_VIEWS), SERVE_SECTION)

__all__ = [
    "SECTION_NAMES",
    "config_options",
    "copy_options",
    "filter_options",
    "mount_options",
    "section_options",
    "serve_options",
    "sync_options",
    "unique_serve_options",
    "vfs_options",
]
