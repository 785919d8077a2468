# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run Tailor over the selected files and merge the reported issues."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .models import Issue
from .parsers import parse_tailor_output
from .tool import OptionValue, TailorBinary

LINT_ALL_TARGET: Final[str] = "."


@dataclass(slots=True)
class CappedIssues:
    """Issues kept after applying the violation cap."""

    issues: list[Issue] = field(default_factory=list)
    other_issues_count: int = 0


def run_tailor(
    files: Sequence[Path],
    tool: TailorBinary,
    options: Mapping[str, OptionValue],
    extra_args: str = "",
    *,
    root: Path,
    lint_all_files: bool = False,
) -> list[Issue]:
    """Invoke Tailor and return every reported issue.

    Files are linted one at a time in order, or the whole ``root`` is linted in
    one pass when ``lint_all_files`` is set. Invocations producing no output
    contribute nothing. A malformed payload aborts the run.

    Args:
        files: Selected Swift files.
        tool: Tailor executable wrapper.
        options: Options translated into Tailor flags.
        extra_args: Additional caller-supplied arguments.
        root: Working directory for every invocation.
        lint_all_files: Lint ``root`` once instead of each file.

    Returns:
        list[Issue]: Issues in invocation order, then output order.
    """

    targets = [LINT_ALL_TARGET] if lint_all_files else [str(path) for path in files]
    issues: list[Issue] = []
    for target in targets:
        output = tool.run(target, options, extra_args, cwd=root)
        if not output.strip():
            continue
        issues.extend(parse_tailor_output(output, target=target))
    return issues


def cap_issues(issues: Sequence[Issue], max_num_violations: int | None) -> CappedIssues:
    """Truncate ``issues`` to ``max_num_violations`` entries.

    Args:
        issues: Issues in reporting order.
        max_num_violations: Maximum number of issues to keep, or ``None`` for no cap.

    Returns:
        CappedIssues: Kept issues and the number of issues dropped.
    """

    if max_num_violations is None:
        return CappedIssues(issues=list(issues))
    limit = max(max_num_violations, 0)
    return CappedIssues(issues=list(issues[:limit]), other_issues_count=max(len(issues) - limit, 0))


__all__ = ["LINT_ALL_TARGET", "CappedIssues", "cap_issues", "run_tailor"]
