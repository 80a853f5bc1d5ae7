# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve the single category that owns an option name."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final

from ..catalog.model_catalog import OptionCatalog
from ..catalog.model_options import OptionDescriptor
from ..catalog.types import FILTER_SUBSYSTEM, MAIN_SUBSYSTEM, MOUNT_SUBSYSTEM, VFS_SUBSYSTEM
from .taxonomy import SERVE_VARIANTS, FlagCategory

COPY_GROUP: Final[str] = "Copy"
SYNC_GROUP: Final[str] = "Sync"


def normalize_flag_name(flag: str) -> str:
    """Return the canonical descriptor name for a flag spelling.

    ``--use-server-modtime``, ``use-server-modtime`` and ``use_server_modtime``
    all normalise to ``use_server_modtime``.

    Args:
        flag: Flag name as typed by a user or stored in a template.

    Returns:
        str: Lower-case name with underscores and without the leading ``--``.
    """

    name = flag.strip()
    if name.startswith("--"):
        name = name[2:]
    return name.replace("-", "_").lower()


def _main_category(descriptor: OptionDescriptor) -> FlagCategory:
    if descriptor.has_group(COPY_GROUP):
        return FlagCategory.COPY
    if descriptor.has_group(SYNC_GROUP):
        return FlagCategory.SYNC
    return FlagCategory.CONFIG


@dataclass(frozen=True, slots=True)
class SubsystemRule:
    """Map a hit in ``subsystem`` to a category."""

    subsystem: str
    resolve: Callable[[OptionDescriptor], FlagCategory]

    def match(self, name: str, catalog: OptionCatalog) -> FlagCategory | None:
        """Return the category for ``name`` when this rule's subsystem knows it."""

        descriptor = catalog.find(self.subsystem, name)
        if descriptor is None:
            return None
        return self.resolve(descriptor)


def _fixed(category: FlagCategory) -> Callable[[OptionDescriptor], FlagCategory]:
    def _resolve(_: OptionDescriptor) -> FlagCategory:
        return category

    return _resolve


# Order is load-bearing: a name present in several subsystems belongs to the
# earliest one so that stored templates regroup identically.
CLASSIFICATION_RULES: Final[tuple[SubsystemRule, ...]] = (
    SubsystemRule(MAIN_SUBSYSTEM, _main_category),
    SubsystemRule(VFS_SUBSYSTEM, _fixed(FlagCategory.VFS)),
    SubsystemRule(FILTER_SUBSYSTEM, _fixed(FlagCategory.FILTER)),
    SubsystemRule(MOUNT_SUBSYSTEM, _fixed(FlagCategory.MOUNT)),
    *(SubsystemRule(variant, _fixed(FlagCategory.for_serve_variant(variant))) for variant in SERVE_VARIANTS),
)


def classify(flag: str, catalog: OptionCatalog) -> FlagCategory | None:
    """Return the category owning ``flag`` or ``None`` when no subsystem has it.

    Args:
        flag: Flag name in any accepted spelling.
        catalog: Catalog snapshot to search.

    Returns:
        FlagCategory | None: First matching category in priority order
        (main, vfs, filter, mount, then serve variants), or ``None``.
    """

    name = normalize_flag_name(flag)
    if not name:
        return None
    for rule in CLASSIFICATION_RULES:
        category = rule.match(name, catalog)
        if category is not None:
            return category
    return None


def classify_many(flags: Iterable[str], catalog: OptionCatalog) -> dict[str, FlagCategory | None]:
    """Classify every flag, keeping the caller's spelling as the key."""

    return {flag: classify(flag, catalog) for flag in flags}


def unclassified(flags: Iterable[str], catalog: OptionCatalog) -> tuple[str, ...]:
    """Return the flags that no subsystem of ``catalog`` recognises."""

    return tuple(flag for flag in flags if classify(flag, catalog) is None)


__all__ = [
    "CLASSIFICATION_RULES",
    "SubsystemRule",
    "classify",
    "classify_many",
    "normalize_flag_name",
    "unclassified",
]
