# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Review-host clients that receive annotations and summaries."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from ..core.logging import emoji
from ..severity import Severity


@runtime_checkable
class ReviewHost(Protocol):
    """Primitives a code-review host exposes to the reporter."""

    def annotate(self, message: str, *, file: str | None, line: int | None, severity: Severity) -> None:
        """Attach ``message`` to ``file``/``line``; errors are fatal annotations."""
        ...

    def post_summary(self, markdown: str) -> None:
        """Publish one markdown comment for the whole run."""
        ...

    def fail_check(self, message: str) -> None:
        """Mark the overall check as failed with ``message``."""
        ...


@dataclass(frozen=True, slots=True)
class Annotation:
    """Annotation captured by :class:`RecordingReviewHost`."""

    message: str
    file: str | None
    line: int | None
    severity: Severity


@dataclass(slots=True)
class RecordingReviewHost:
    """Keep everything the reporter sends in memory."""

    annotations: list[Annotation] = field(default_factory=list)
    summaries: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    def annotate(self, message: str, *, file: str | None, line: int | None, severity: Severity) -> None:
        self.annotations.append(Annotation(message=message, file=file, line=line, severity=severity))

    def post_summary(self, markdown: str) -> None:
        self.summaries.append(markdown)

    def fail_check(self, message: str) -> None:
        self.failures.append(message)


def _gha_escape(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _gha_escape_property(value: str) -> str:
    return _gha_escape(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsHost:
    """Emit GitHub Actions workflow commands.

    Summaries are appended to ``$GITHUB_STEP_SUMMARY`` when the runner
    provides it, otherwise printed.
    """

    def __init__(self, *, stream: TextIO | None = None, summary_path: Path | None = None) -> None:
        self._stream = stream
        env_summary = os.environ.get("GITHUB_STEP_SUMMARY")
        self._summary_path = summary_path or (Path(env_summary) if env_summary else None)

    def _emit(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)

    def annotate(self, message: str, *, file: str | None, line: int | None, severity: Severity) -> None:
        kind = "error" if severity is Severity.ERROR else "warning"
        props: list[str] = []
        if file:
            props.append(f"file={_gha_escape_property(file)}")
        if line is not None:
            props.append(f"line={line}")
        prefix = f"::{kind} {','.join(props)}" if props else f"::{kind}"
        self._emit(f"{prefix}::{_gha_escape(message)}")

    def post_summary(self, markdown: str) -> None:
        if self._summary_path is None:
            self._emit(markdown)
            return
        with self._summary_path.open("a", encoding="utf-8") as handle:
            handle.write(markdown)
            if not markdown.endswith("\n"):
                handle.write("\n")

    def fail_check(self, message: str) -> None:
        self._emit(f"::error::{_gha_escape(message)}")


class ConsoleReviewHost:
    """Render review output to a Rich console for local runs."""

    def __init__(self, console: Console | None = None, *, use_emoji: bool = True) -> None:
        self._console = console or Console(soft_wrap=True)
        self._use_emoji = use_emoji

    def annotate(self, message: str, *, file: str | None, line: int | None, severity: Severity) -> None:
        style = "bold red" if severity is Severity.ERROR else "bold yellow"
        text = Text(f"{severity.value}", style=style)
        if file:
            location = f"{file}:{line}" if line is not None else file
            text.append(f" {location}", style="cyan")
        text.append(f" {message}")
        self._console.print(text)

    def post_summary(self, markdown: str) -> None:
        self._console.print(Markdown(markdown))

    def fail_check(self, message: str) -> None:
        self._console.print(Text(f"{emoji('❌ ', self._use_emoji)}{message}", style="bold red"))


__all__ = ["Annotation", "ConsoleReviewHost", "GitHubActionsHost", "RecordingReviewHost", "ReviewHost"]
