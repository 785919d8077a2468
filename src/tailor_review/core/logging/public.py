# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from ...runtime.console.manager import detect_tty, get_console_manager

_KEY_VALUE_RE = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


@dataclass(slots=True)
class ReviewLogger:
    """Verbose diagnostics for a review run.

    Messages are dropped unless ``verbose`` is set. ``key=value`` pairs are
    highlighted so option dumps stay readable in CI logs.
    """

    verbose: bool = False
    use_emoji: bool = False
    console: Console | None = field(default=None)

    def log(self, message: str) -> None:
        """Print ``message`` when verbose output is enabled.

        Args:
            message: Diagnostic text, optionally containing ``key=value`` pairs.
        """

        if not self.verbose:
            return
        console = self.console or get_console_manager().get(color=detect_tty(), emoji=self.use_emoji)
        text = Text("[tailor] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start])
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:])
        console.print(text)

    def warn(self, message: str) -> None:
        """Emit a warning regardless of the verbose flag."""

        warn(message, use_emoji=self.use_emoji)


__all__ = ["ReviewLogger", "emoji", "fail", "ok", "warn"]
