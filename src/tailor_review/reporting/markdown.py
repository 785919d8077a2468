# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown and message rendering for Tailor issues."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..filtering import PartitionedIssues
from ..models import Issue

SUMMARY_HEADING: Final[str] = "### Tailor found issues"
TABLE_HEADER: Final[str] = "File | Line | Reason |\n| --- | ----- | ----- |\n"


def other_issues_message(count: int) -> str:
    """Return the note describing issues dropped by the violation cap."""

    violations = "violation" if count == 1 else "violations"
    return f"Tailor also found {count} more {violations} with this PR."


def _cell(value: object) -> str:
    return str(value if value is not None else "").replace("|", "\\|").replace("\n", " ")


def markdown_issues(issues: Sequence[Issue], heading: str) -> str:
    """Render ``issues`` as a markdown table under ``heading``."""

    rows = "".join(
        f"{_cell(issue.filename)} | {_cell(issue.line)} | {_cell(issue.message)} ({_cell(issue.rule)})\n"
        for issue in issues
    )
    return f"#### {heading}\n\n{TABLE_HEADER}{rows}"


def render_summary(partition: PartitionedIssues, other_issues_count: int = 0) -> str | None:
    """Return the batch-mode summary, or ``None`` when nothing was found.

    Args:
        partition: Warnings and errors to list.
        other_issues_count: Issues dropped by the violation cap.

    Returns:
        str | None: Markdown document for the review host.
    """

    if partition.empty:
        return None
    message = f"{SUMMARY_HEADING}\n\n"
    if partition.warnings:
        message += markdown_issues(partition.warnings, "Warnings")
    if partition.errors:
        message += markdown_issues(partition.errors, "Errors")
    if other_issues_count > 0:
        message += f"\n{other_issues_message(other_issues_count)}"
    return message


def inline_message(issue: Issue) -> str:
    """Return the body of an inline annotation.

    The second line repeats the rule id and ``File.swift:line`` so reviewers
    can paste them into suppressions or Xcode's Open Quickly.
    """

    location = f"{issue.filename}:{issue.line}" if issue.line is not None else issue.filename
    return f"{issue.message}\n`{issue.rule}` `{location}`"


__all__ = [
    "SUMMARY_HEADING",
    "inline_message",
    "markdown_issues",
    "other_issues_message",
    "render_summary",
]
