# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate models shared by the classifier and grouping engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import CatalogIntegrityError
from .model_options import OptionDescriptor


@dataclass(frozen=True, slots=True)
class OptionCatalog:
    """Immutable snapshot of option descriptors keyed by subsystem identifier.

    A refreshed catalog is a new snapshot; existing instances are never
    mutated so that concurrent classification passes see a consistent view.
    """

    _subsystems: Mapping[str, tuple[OptionDescriptor, ...]]
    checksum: str = ""
    _index: Mapping[str, Mapping[str, OptionDescriptor]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze the subsystem mapping and build the visible-name index."""

        frozen: dict[str, tuple[OptionDescriptor, ...]] = {}
        index: dict[str, Mapping[str, OptionDescriptor]] = {}
        for subsystem, descriptors in self._subsystems.items():
            entries = tuple(descriptors)
            seen: set[str] = set()
            visible: dict[str, OptionDescriptor] = {}
            for descriptor in entries:
                if descriptor.name in seen:
                    raise CatalogIntegrityError(
                        f"Duplicate option '{descriptor.name}' detected in subsystem '{subsystem}'",
                    )
                seen.add(descriptor.name)
                if not descriptor.hidden:
                    visible[descriptor.name] = descriptor
            frozen[subsystem] = entries
            index[subsystem] = MappingProxyType(visible)
        object.__setattr__(self, "_subsystems", MappingProxyType(frozen))
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def empty(cls) -> OptionCatalog:
        """Return a catalog without any subsystems."""

        return cls(_subsystems={})

    @property
    def subsystems(self) -> tuple[str, ...]:
        """Return subsystem identifiers in payload order."""

        return tuple(self._subsystems)

    def descriptors(self, subsystem: str) -> tuple[OptionDescriptor, ...]:
        """Return every descriptor of ``subsystem`` including hidden entries.

        Args:
            subsystem: Subsystem identifier such as ``main`` or ``webdav``.

        Returns:
            tuple[OptionDescriptor, ...]: Descriptors in payload order, or an
            empty tuple when the subsystem is unknown.
        """

        return self._subsystems.get(subsystem, ())

    def visible(self, subsystem: str) -> tuple[OptionDescriptor, ...]:
        """Return the descriptors of ``subsystem`` that are not hidden."""

        return tuple(self._index.get(subsystem, {}).values())

    def find(self, subsystem: str, name: str) -> OptionDescriptor | None:
        """Return the visible descriptor called ``name`` within ``subsystem``.

        Args:
            subsystem: Subsystem identifier to search.
            name: Canonical option name (lower-case, underscores).

        Returns:
            OptionDescriptor | None: Matching descriptor, or ``None`` when the
            subsystem is unknown, the name is absent, or the option is hidden.
        """

        return self._index.get(subsystem, {}).get(name)

    def contains(self, subsystem: str, name: str) -> bool:
        """Return ``True`` when ``subsystem`` exposes a visible ``name``."""

        return self.find(subsystem, name) is not None

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._subsystems.values())


__all__ = ["OptionCatalog"]
