# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Closed set of categories a flag can be filed under."""

from __future__ import annotations

from enum import Enum
from typing import Final

# Declaration order is the classification priority between serve variants.
SERVE_VARIANTS: Final[tuple[str, ...]] = (
    "http",
    "webdav",
    "ftp",
    "sftp",
    "dlna",
    "s3",
    "nfs",
    "restic",
    "docker",
)

SERVE_PREFIX: Final[str] = "serve."


class FlagCategory(str, Enum):
    """Enumerate template sections a flag may belong to."""

    COPY = "copy"
    SYNC = "sync"
    CONFIG = "config"
    VFS = "vfs"
    FILTER = "filter"
    MOUNT = "mount"
    SERVE_HTTP = "serve.http"
    SERVE_WEBDAV = "serve.webdav"
    SERVE_FTP = "serve.ftp"
    SERVE_SFTP = "serve.sftp"
    SERVE_DLNA = "serve.dlna"
    SERVE_S3 = "serve.s3"
    SERVE_NFS = "serve.nfs"
    SERVE_RESTIC = "serve.restic"
    SERVE_DOCKER = "serve.docker"

    @property
    def is_serve(self) -> bool:
        """Return ``True`` for ``serve.<variant>`` categories."""

        return self.value.startswith(SERVE_PREFIX)

    @property
    def serve_variant(self) -> str | None:
        """Return the serving-backend variant, or ``None`` for other categories."""

        if not self.is_serve:
            return None
        return self.value[len(SERVE_PREFIX) :]

    @classmethod
    def for_serve_variant(cls, variant: str) -> FlagCategory:
        """Return the category owning options of ``variant``.

        Raises:
            ValueError: If ``variant`` is not a known serving-backend variant.
        """

        return cls(f"{SERVE_PREFIX}{variant}")

    @classmethod
    def from_raw(cls, raw: str) -> FlagCategory | None:
        """Return the member matching ``raw`` or ``None`` when unrecognised."""

        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


FLAG_CATEGORIES: Final[tuple[FlagCategory, ...]] = tuple(FlagCategory)
SERVE_CATEGORIES: Final[tuple[FlagCategory, ...]] = tuple(
    FlagCategory.for_serve_variant(variant) for variant in SERVE_VARIANTS
)

__all__ = [
    "FLAG_CATEGORIES",
    "FlagCategory",
    "SERVE_CATEGORIES",
    "SERVE_PREFIX",
    "SERVE_VARIANTS",
]
