# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises option catalog snapshots."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from .checksum import compute_catalog_checksum
from .errors import CatalogIntegrityError, CatalogValidationError
from .io import load_document
from .model_catalog import OptionCatalog
from .model_options import OptionDescriptor
from .schema import validate_payload
from .types import JSONValue

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogLoadReport:
    """Catalog snapshot paired with the entries skipped while loading it."""

    catalog: OptionCatalog
    skipped: tuple[str, ...]


@dataclass(slots=True)
class OptionCatalogLoader:
    """Loader that validates and materialises ``options/info`` payloads.

    Catalog payloads are best-effort data: descriptors missing a name or a
    type, or repeating a name already seen in the same subsystem, are skipped
    with a warning instead of failing the whole snapshot.
    """

    validate: bool = True

    def from_payload(self, payload: Mapping[str, JSONValue], *, context: str = "options/info") -> OptionCatalog:
        """Build a catalog snapshot from an in-memory payload.

        Args:
            payload: Mapping of subsystem identifier to option arrays.
            context: Human-readable context used in log and error messages.

        Returns:
            OptionCatalog: Immutable catalog snapshot.

        Raises:
            CatalogValidationError: If the payload root is structurally invalid.
        """

        return self.load_with_report(payload, context=context).catalog

    def load_path(self, path: Path) -> OptionCatalog:
        """Build a catalog snapshot from a JSON document on disk.

        Args:
            path: Location of a saved ``options/info`` response.

        Returns:
            OptionCatalog: Immutable catalog snapshot.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            CatalogValidationError: If the document is not a valid payload.
        """

        return self.from_payload(load_document(path), context=str(path))

    def load_with_report(
        self,
        payload: Mapping[str, JSONValue],
        *,
        context: str = "options/info",
    ) -> CatalogLoadReport:
        """Build a catalog snapshot and report the descriptors that were skipped.

        Args:
            payload: Mapping of subsystem identifier to option arrays.
            context: Human-readable context used in log and error messages.

        Returns:
            CatalogLoadReport: Snapshot plus human-readable skip reasons.

        Raises:
            CatalogValidationError: If the payload root is structurally invalid.
        """

        if self.validate:
            validate_payload(payload, context=context)
        skipped: list[str] = []
        subsystems: dict[str, tuple[OptionDescriptor, ...]] = {}
        for subsystem, entries in payload.items():
            if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes, bytearray)):
                raise CatalogValidationError(f"{context}: expected '{subsystem}' to be an array")
            subsystems[subsystem] = self._load_subsystem(
                entries,
                context=f"{context}.{subsystem}",
                skipped=skipped,
            )
        catalog = OptionCatalog(_subsystems=subsystems, checksum=compute_catalog_checksum(payload))
        LOGGER.debug(
            "loaded option catalog subsystems=%d options=%d skipped=%d",
            len(subsystems),
            len(catalog),
            len(skipped),
        )
        return CatalogLoadReport(catalog=catalog, skipped=tuple(skipped))

    @staticmethod
    def _load_subsystem(
        entries: Sequence[JSONValue],
        *,
        context: str,
        skipped: list[str],
    ) -> tuple[OptionDescriptor, ...]:
        """Return the well-formed, uniquely named descriptors of one subsystem."""

        descriptors: list[OptionDescriptor] = []
        seen: set[str] = set()
        for index, entry in enumerate(entries):
            entry_context = f"{context}[{index}]"
            if not isinstance(entry, Mapping):
                reason = f"{entry_context}: expected an option object"
                LOGGER.warning("skipping catalog entry: %s", reason)
                skipped.append(reason)
                continue
            try:
                descriptor = OptionDescriptor.from_mapping(entry, context=entry_context)
            except CatalogIntegrityError as exc:
                LOGGER.warning("skipping catalog entry: %s", exc)
                skipped.append(str(exc))
                continue
            if descriptor.name in seen:
                reason = f"{entry_context}: duplicate option '{descriptor.name}'"
                LOGGER.warning("skipping catalog entry: %s", reason)
                skipped.append(reason)
                continue
            seen.add(descriptor.name)
            descriptors.append(descriptor)
        return tuple(descriptors)


__all__ = [
    "CatalogLoadReport",
    "OptionCatalogLoader",
]
