# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Turn a pasted command line into a mapping of flag names to typed values.

The parser is tolerant of partial input because it runs while the user is
still typing: it never raises on user text and simply ignores fragments it
cannot interpret.

Tokenisation is whitespace based. A value is the first whitespace-delimited
token after the flag name, so ``--header "X-Foo: bar"`` keeps only
``"X-Foo:``. Quote-aware splitting is not supported.
"""

from __future__ import annotations

import re
from typing import Final

from ..catalog.types import FlagMapping, FlagValue
from .classifier import normalize_flag_name

FLAG_SEPARATOR: Final[str] = "--"
LIST_SEPARATOR: Final[str] = ","

_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_LITERALS: Final[dict[str, FlagValue]] = {
    "true": True,
    "false": False,
    "null": None,
}


def coerce_value(raw: str | None) -> FlagValue:
    """Return the typed value for the raw text following a flag name.

    Precedence: absent or blank → ``True``; ``true``/``false``/``null``
    literals; a full signed ASCII integer or decimal → ``int``/``float``; text
    containing a comma → list of the comma-separated pieces (untrimmed);
    anything else → the text itself. Numbers are tried before the comma
    split, so ``"1,000"`` becomes ``["1", "000"]``.

    Args:
        raw: Value token, or ``None`` for a presence-only flag.

    Returns:
        FlagValue: Coerced value.
    """

    if raw is None:
        return True
    token = raw.strip()
    if not token:
        return True
    if token in _LITERALS:
        return _LITERALS[token]
    if _NUMBER_RE.fullmatch(token):
        if "." in token:
            return float(token)
        return int(token)
    if LIST_SEPARATOR in token:
        return token.split(LIST_SEPARATOR)
    return token


def split_flag(fragment: str) -> tuple[str, str | None]:
    """Split one ``--``-delimited fragment into its name and value token.

    Args:
        fragment: Text between two flag separators, without the separator.

    Returns:
        tuple[str, str | None]: Raw flag name (possibly empty) and the first
        whitespace-delimited token that follows it, if any.
    """

    parts = fragment.split(maxsplit=1)
    if not parts:
        return "", None
    if len(parts) == 1:
        return parts[0], None
    value_tokens = parts[1].split(maxsplit=1)
    return parts[0], value_tokens[0] if value_tokens else None


def parse_command(text: str) -> FlagMapping:
    """Parse a command line such as ``rclone copy src: dst: --dry-run``.

    Everything before the first ``--`` (program, subcommand, positional
    paths) is discarded. Keys are canonical option names; when a flag is
    repeated the last occurrence wins.

    Args:
        text: Raw command line, possibly incomplete.

    Returns:
        FlagMapping: Flag names mapped to coerced values, in first-seen order.
    """

    start = text.find(FLAG_SEPARATOR)
    if start < 0:
        return {}
    flags: FlagMapping = {}
    for fragment in text[start:].split(FLAG_SEPARATOR):
        if not fragment:
            continue
        raw_name, raw_value = split_flag(fragment)
        name = normalize_flag_name(raw_name)
        if not name:
            continue
        flags[name] = coerce_value(raw_value)
    return flags


__all__ = [
    "FLAG_SEPARATOR",
    "coerce_value",
    "parse_command",
    "split_flag",
]
