# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Partition flag mappings into per-category template sections."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..catalog.model_catalog import OptionCatalog
from ..catalog.types import FlagMapping, FlagValue
from .classifier import classify
from .parser import parse_command
from .taxonomy import FLAG_CATEGORIES, SERVE_CATEGORIES, SERVE_VARIANTS, FlagCategory

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GroupedFlags:
    """Flag values partitioned by category.

    Every category of the taxonomy is present, possibly with an empty
    section. Serve categories stay separate per variant; use
    :meth:`merged_serve` for the combined view.
    """

    sections: Mapping[FlagCategory, Mapping[str, FlagValue]]

    def __post_init__(self) -> None:
        """Fill missing categories and freeze every section."""

        frozen = {
            category: MappingProxyType(dict(self.sections.get(category, {}))) for category in FLAG_CATEGORIES
        }
        object.__setattr__(self, "sections", MappingProxyType(frozen))

    @classmethod
    def empty(cls) -> GroupedFlags:
        """Return a result where every section is empty."""

        return cls(sections={})

    def section(self, category: FlagCategory) -> dict[str, FlagValue]:
        """Return a copy of the values filed under ``category``."""

        return dict(self.sections[category])

    def serve(self, variant: str) -> dict[str, FlagValue]:
        """Return a copy of the values filed under ``serve.<variant>``.

        Raises:
            ValueError: If ``variant`` is not a known serving-backend variant.
        """

        return self.section(FlagCategory.for_serve_variant(variant))

    def merged_serve(self) -> dict[str, FlagValue]:
        """Return the union of all serve sections.

        Variants are merged in declared order, so a key present under two
        variants takes the value of the later one.
        """

        merged: dict[str, FlagValue] = {}
        for variant in SERVE_VARIANTS:
            merged.update(self.sections[FlagCategory.for_serve_variant(variant)])
        return merged

    def flatten(self) -> FlagMapping:
        """Return every section merged back into a single mapping."""

        return flatten_grouped(self)

    def counts(self) -> dict[FlagCategory, int]:
        """Return the number of values per category."""

        return {category: len(values) for category, values in self.sections.items()}

    def non_empty(self) -> Iterator[tuple[FlagCategory, Mapping[str, FlagValue]]]:
        """Yield the categories that hold at least one value, in taxonomy order."""

        for category, values in self.sections.items():
            if values:
                yield category, values

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no category holds a value."""

        return not any(self.sections.values())

    def overlay(self, other: GroupedFlags, *, merge: bool = True) -> GroupedFlags:
        """Apply ``other`` (typically a stored template) on top of this result.

        Args:
            other: Grouped values to apply.
            merge: When ``True`` keys are merged per section and ``other``
                wins on conflicts; when ``False`` each non-empty section of
                ``other`` replaces the corresponding section wholesale.

        Returns:
            GroupedFlags: New grouped result; neither input is modified.
        """

        sections: dict[FlagCategory, dict[str, FlagValue]] = {}
        for category in FLAG_CATEGORIES:
            incoming = other.sections[category]
            if merge:
                sections[category] = {**self.sections[category], **incoming}
            else:
                sections[category] = dict(incoming) if incoming else dict(self.sections[category])
        return GroupedFlags(sections=sections)


def group_flags(flags: Mapping[str, FlagValue], catalog: OptionCatalog) -> GroupedFlags:
    """Partition ``flags`` by the category each key classifies to.

    Keys keep the caller's spelling. Keys that no subsystem recognises are
    dropped because a template has nowhere to store them; callers wanting
    strictness should check :func:`~rcflags.flags.classifier.unclassified`
    first.

    Args:
        flags: Flat mapping of flag names to values.
        catalog: Catalog snapshot used for classification.

    Returns:
        GroupedFlags: Fresh grouped result.
    """

    sections: dict[FlagCategory, dict[str, FlagValue]] = {}
    for key, value in flags.items():
        category = classify(key, catalog)
        if category is None:
            LOGGER.debug("dropping unclassifiable flag %s", key)
            continue
        sections.setdefault(category, {})[key] = value
    return GroupedFlags(sections=sections)


def flatten_grouped(grouped: GroupedFlags) -> FlagMapping:
    """Merge every section of ``grouped`` into one flat mapping.

    Non-serve sections come first in taxonomy order, followed by the serve
    sections in declared variant order.
    """

    flat: FlagMapping = {}
    for category in FLAG_CATEGORIES:
        if category in SERVE_CATEGORIES:
            continue
        flat.update(grouped.sections[category])
    flat.update(grouped.merged_serve())
    return flat


def import_command(text: str, catalog: OptionCatalog) -> GroupedFlags:
    """Parse a pasted command line and group its flags."""

    return group_flags(parse_command(text), catalog)


__all__ = [
    "GroupedFlags",
    "flatten_grouped",
    "group_flags",
    "import_command",
]
