# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON text helpers for storing and editing template sections."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from typing import Final

from ..catalog.errors import TemplateDecodeError
from ..catalog.types import FlagMapping, FlagValue
from .grouping import GroupedFlags
from .taxonomy import FlagCategory

DEFAULT_INDENT: Final[int] = 2

# Display sections in the order their text blobs are combined on save.
DISPLAY_SECTIONS: Final[tuple[str, ...]] = ("mount", "config", "vfs", "filter", "copy", "sync", "serve")

_SMART_QUOTES: Final[dict[str, str]] = {
    "‘": "'",
    "’": "'",
    "‚": "'",
    "“": '"',
    "”": '"',
    "„": '"',
}
_SMART_QUOTE_RE: Final[re.Pattern[str]] = re.compile("[" + "".join(_SMART_QUOTES) + "]")


def replace_smart_quotes(text: str) -> str:
    """Replace typographic quotes inserted by some keyboards with ASCII quotes."""

    return _SMART_QUOTE_RE.sub(lambda match: _SMART_QUOTES[match.group(0)], text)


def dump_section(values: Mapping[str, FlagValue], *, indent: int = DEFAULT_INDENT) -> str:
    """Return ``values`` as a JSON object text blob."""

    return json.dumps(dict(values), indent=indent, ensure_ascii=False)


def display_sections(grouped: GroupedFlags) -> dict[str, FlagMapping]:
    """Return the grouped values keyed by display section.

    The ``serve`` section holds the variant-merged view.
    """

    sections: dict[str, FlagMapping] = {}
    for section in DISPLAY_SECTIONS:
        if section == "serve":
            sections[section] = grouped.merged_serve()
        else:
            sections[section] = grouped.section(FlagCategory(section))
    return sections


def dump_grouped(grouped: GroupedFlags, *, indent: int = DEFAULT_INDENT) -> dict[str, str]:
    """Return one JSON blob per display section."""

    return {section: dump_section(values, indent=indent) for section, values in display_sections(grouped).items()}


def _is_flag_value(value: object) -> bool:
    if value is None or isinstance(value, (bool, int, float, str)):
        return True
    if isinstance(value, list):
        return all(isinstance(item, str) for item in value)
    return False


def load_section(text: str) -> FlagMapping:
    """Decode a stored JSON section into a flag mapping.

    Args:
        text: JSON object text, possibly containing typographic quotes.

    Returns:
        FlagMapping: Decoded mapping.

    Raises:
        TemplateDecodeError: If the text is not valid JSON, the root is not an
            object, or a value is not a boolean, number, string, list of
            strings or ``null``.
    """

    try:
        payload = json.loads(replace_smart_quotes(text))
    except json.JSONDecodeError as exc:
        raise TemplateDecodeError(f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise TemplateDecodeError(f"expected a JSON object, got {type(payload).__name__}")
    for key, value in payload.items():
        if not _is_flag_value(value):
            raise TemplateDecodeError(f"unsupported value for '{key}': {type(value).__name__}")
    return payload


def combine_sections(texts: Iterable[str]) -> FlagMapping:
    """Decode several section blobs and merge them, later blobs winning.

    Every blob is decoded before anything is returned, so a single malformed
    section fails the whole operation.

    Raises:
        TemplateDecodeError: If any blob cannot be decoded.
    """

    combined: FlagMapping = {}
    for index, text in enumerate(texts):
        try:
            combined.update(load_section(text))
        except TemplateDecodeError as exc:
            raise TemplateDecodeError(f"section {index}: {exc}") from exc
    return combined


def json_key_count(text: str) -> int:
    """Return the number of keys in a JSON object blob, ``0`` if it does not decode."""

    try:
        return len(load_section(text))
    except TemplateDecodeError:
        return 0


def options_subtitle(count: int) -> str | None:
    """Return a short ``"3 options set"`` summary, or ``None`` for zero."""

    if count <= 0:
        return None
    return f"{count} option{'' if count == 1 else 's'} set"


__all__ = [
    "DISPLAY_SECTIONS",
    "combine_sections",
    "display_sections",
    "dump_grouped",
    "dump_section",
    "json_key_count",
    "load_section",
    "options_subtitle",
    "replace_smart_quotes",
]
