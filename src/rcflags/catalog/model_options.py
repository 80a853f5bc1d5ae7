# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option descriptor models for catalog entries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from .types import JSONValue
from .utils import (
    expect_string,
    freeze_json_value,
    optional_bool,
    optional_level,
    optional_string,
    tag_tuple,
)

OptionType: TypeAlias = Literal["boolean", "string", "numeric", "password"]

_NUMERIC_TYPES: Final[frozenset[str]] = frozenset(
    {
        "int",
        "int32",
        "int64",
        "uint",
        "uint32",
        "uint64",
        "float32",
        "float64",
    },
)
_BOOLEAN_TYPES: Final[frozenset[str]] = frozenset({"bool", "boolean"})


def normalize_option_type(value: JSONValue | None, *, is_password: bool, context: str) -> OptionType:
    """Return the primitive option kind used for coercion and display hints.

    Args:
        value: Raw ``Type`` value sourced from the catalog payload.
        is_password: ``True`` when the payload marks the option as a password.
        context: Human-readable context used in error messages.

    Returns:
        OptionType: Primitive kind recognised by the runtime. Rich rclone
        types such as ``Duration`` or ``SizeSuffix`` collapse to ``string``.

    Raises:
        CatalogIntegrityError: If the type is missing or not a string.

    """

    raw = expect_string(value, key="Type", context=context).strip().lower()
    if is_password:
        return "password"
    if raw in _BOOLEAN_TYPES:
        return "boolean"
    if raw in _NUMERIC_TYPES:
        return "numeric"
    return "string"


@dataclass(frozen=True, slots=True)
class OptionDescriptor:
    """Metadata describing a single configurable flag of a subsystem."""

    name: str
    groups: tuple[str, ...]
    help: str
    option_type: OptionType
    hidden: bool
    default: JSONValue = None
    default_text: str | None = None
    advanced: bool = False
    required: bool = False

    @property
    def title(self) -> str:
        """Return the first line of the help text."""

        return self.help.split("\n", 1)[0].strip()

    @property
    def details(self) -> str:
        """Return the help text following the title line."""

        parts = self.help.split("\n", 1)
        return parts[1].strip() if len(parts) > 1 else ""

    @property
    def flag(self) -> str:
        """Return the command-line spelling of the option (``--dry-run``)."""

        return "--" + self.name.replace("_", "-")

    def has_group(self, group: str) -> bool:
        """Return ``True`` when ``group`` is one of the descriptor's tags."""

        return group in self.groups

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> OptionDescriptor:
        """Create an ``OptionDescriptor`` from an ``options/info`` entry.

        Args:
            data: Mapping describing a single option.
            context: Human-readable context used in error messages.

        Returns:
            OptionDescriptor: Frozen descriptor instance.

        Raises:
            CatalogIntegrityError: If required option metadata is missing or invalid.

        """

        name_value = expect_string(data.get("Name"), key="Name", context=context).strip().lower()
        is_password = optional_bool(data.get("IsPassword"), key="IsPassword", context=context)
        option_type_value = normalize_option_type(
            data.get("Type"),
            is_password=is_password,
            context=context,
        )
        help_value = optional_string(data.get("Help"), key="Help", context=context) or ""
        groups_value = tag_tuple(data.get("Groups"), key="Groups", context=context)
        hide_level = optional_level(data.get("Hide"), key="Hide", context=context)
        return OptionDescriptor(
            name=name_value,
            groups=groups_value,
            help=help_value,
            option_type=option_type_value,
            hidden=hide_level != 0,
            default=freeze_json_value(data.get("Default"), context=f"{context}.Default"),
            default_text=optional_string(data.get("DefaultStr"), key="DefaultStr", context=context),
            advanced=optional_bool(data.get("Advanced"), key="Advanced", context=context),
            required=optional_bool(data.get("Required"), key="Required", context=context),
        )


def sort_by_name(descriptors: Iterable[OptionDescriptor]) -> tuple[OptionDescriptor, ...]:
    """Return ``descriptors`` ordered alphabetically by name."""

    return tuple(sorted(descriptors, key=lambda descriptor: descriptor.name))


__all__: Final[tuple[str, ...]] = (
    "OptionDescriptor",
    "OptionType",
    "normalize_option_type",
    "sort_by_name",
)
