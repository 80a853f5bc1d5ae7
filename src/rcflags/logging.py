# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console output with optional colour and emoji support."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.rule import Rule
from rich.text import Text


@dataclass(frozen=True, slots=True)
class MessageKind:
    """Prefix glyph and colour of one kind of user-facing message."""

    glyph: str
    style: str


INFO: Final[MessageKind] = MessageKind("ℹ️ ", "cyan")
OK: Final[MessageKind] = MessageKind("✅ ", "green")
WARN: Final[MessageKind] = MessageKind("⚠️ ", "yellow")
FAIL: Final[MessageKind] = MessageKind("❌ ", "red")


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def console_for(*, color: bool, emoji: bool, tty: bool) -> Console:
    """Return the shared console for one combination of output preferences.

    Consoles resolve ``sys.stdout`` at print time, so a cached instance keeps
    following redirected streams.
    """

    styled = color and tty
    return Console(
        color_system="auto" if styled else None,
        force_terminal=tty,
        no_color=not styled,
        emoji=emoji,
        soft_wrap=True,
    )


def emit(kind: MessageKind, message: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``message`` with the prefix and colour of ``kind``.

    Args:
        kind: Message kind such as :data:`WARN` or :data:`FAIL`.
        message: Plain text; Rich markup in it is printed literally.
        use_emoji: Whether the emoji prefix is shown.
        use_color: Explicit colour preference; ``None`` follows the terminal.
    """

    tty = stdout_is_tty()
    color = tty if use_color is None else use_color
    text = Text(f"{kind.glyph if use_emoji else ''}{message}")
    if color:
        text.stylize(kind.style)
    console_for(color=color, emoji=use_emoji, tty=tty).print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating blocks of console output."""

    console = console_for(color=use_color, emoji=True, tty=stdout_is_tty())
    if use_color:
        console.print()
        console.print(Rule(Text(title)))
    else:
        console.print(Text(f"\n--- {title} ---"))


__all__ = ["FAIL", "INFO", "OK", "WARN", "MessageKind", "console_for", "emit", "section"]
