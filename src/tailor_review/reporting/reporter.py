# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deliver partitioned issues to a review host."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..filesystem.paths import relative_display_path
from ..filtering import PartitionedIssues
from ..models import FAILURE_MESSAGE, CheckStatus, Issue, ReportOutcome
from ..severity import Severity
from .host import ReviewHost
from .markdown import inline_message, other_issues_message, render_summary


def _send_inline(host: ReviewHost, issues: Sequence[Issue], severity: Severity, root: Path) -> None:
    for issue in issues:
        host.annotate(
            inline_message(issue),
            file=relative_display_path(issue.path, root),
            line=issue.line,
            severity=severity,
        )


def report_issues(
    host: ReviewHost,
    partition: PartitionedIssues,
    *,
    inline_mode: bool = False,
    fail_on_error: bool = False,
    other_issues_count: int = 0,
    root: Path | None = None,
) -> ReportOutcome:
    """Send issues to ``host`` and return the terminal check state.

    Inline mode annotates every issue on its line; errors are fatal only when
    ``fail_on_error`` is set. Batch mode posts a single markdown summary and
    fails the check when ``fail_on_error`` is set and errors exist.

    Args:
        host: Review host receiving the output.
        partition: Issues split by severity.
        inline_mode: Annotate lines instead of posting a summary.
        fail_on_error: Fail the check when any error is present.
        other_issues_count: Issues dropped by the violation cap.
        root: Directory annotation paths are made relative to.

    Returns:
        ReportOutcome: ``failed`` exactly when ``fail_on_error`` and errors exist.
    """

    failed = fail_on_error and bool(partition.errors)
    if inline_mode:
        base = root or Path.cwd()
        _send_inline(host, partition.warnings, Severity.WARNING, base)
        _send_inline(host, partition.errors, Severity.ERROR if fail_on_error else Severity.WARNING, base)
        if other_issues_count > 0:
            host.annotate(other_issues_message(other_issues_count), file=None, line=None, severity=Severity.WARNING)
    else:
        summary = render_summary(partition, other_issues_count)
        if summary is not None:
            host.post_summary(summary)
            if failed:
                host.fail_check(FAILURE_MESSAGE)

    return ReportOutcome(
        status=CheckStatus.FAILED if failed else CheckStatus.PASSED,
        message=FAILURE_MESSAGE if failed else None,
        warnings=len(partition.warnings),
        errors=len(partition.errors),
        other_issues=other_issues_count,
        unknown=len(partition.unknown),
    )


__all__ = ["report_issues"]
