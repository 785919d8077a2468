# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Prune issues with a caller predicate and split them by severity."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .models import Issue
from .severity import Severity

IssuePredicate = Callable[[Issue], bool]


@dataclass(slots=True)
class PartitionedIssues:
    """Issues grouped by severity, preserving reporting order."""

    warnings: list[Issue] = field(default_factory=list)
    errors: list[Issue] = field(default_factory=list)
    unknown: list[Issue] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        """Return ``True`` when there is nothing to report."""
        return not self.warnings and not self.errors


def apply_predicate(issues: Sequence[Issue], predicate: IssuePredicate | None) -> list[Issue]:
    """Keep the issues accepted by ``predicate``; exceptions propagate."""

    if predicate is None:
        return list(issues)
    return [issue for issue in issues if predicate(issue)]


def partition_issues(issues: Sequence[Issue]) -> PartitionedIssues:
    """Split ``issues`` into warnings and errors.

    Issues with an unrecognised severity land in ``unknown`` and are not
    reported as either.
    """

    partition = PartitionedIssues()
    for issue in issues:
        if issue.severity is Severity.WARNING:
            partition.warnings.append(issue)
        elif issue.severity is Severity.ERROR:
            partition.errors.append(issue)
        else:
            partition.unknown.append(issue)
    return partition


__all__ = ["IssuePredicate", "PartitionedIssues", "apply_predicate", "partition_issues"]
