# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the option catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

FlagValue: TypeAlias = bool | int | float | str | list[str] | None
FlagMapping: TypeAlias = dict[str, FlagValue]

MAIN_SUBSYSTEM: Final[str] = "main"
VFS_SUBSYSTEM: Final[str] = "vfs"
FILTER_SUBSYSTEM: Final[str] = "filter"
MOUNT_SUBSYSTEM: Final[str] = "mount"

__all__ = [
    "FILTER_SUBSYSTEM",
    "FlagMapping",
    "FlagValue",
    "JSONPrimitive",
    "JSONValue",
    "MAIN_SUBSYSTEM",
    "MOUNT_SUBSYSTEM",
    "VFS_SUBSYSTEM",
]
