# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for predicate filtering and severity partitioning."""

from __future__ import annotations

import pytest

from tailor_review.filtering import apply_predicate, partition_issues


def test_apply_predicate_without_predicate_is_identity(make_issue) -> None:
    issues = [make_issue(line=1), make_issue(line=2)]

    assert apply_predicate(issues, None) == issues


def test_apply_predicate_keeps_matching_issues(make_issue) -> None:
    issues = [make_issue(rule="line_length"), make_issue(rule="trailing_whitespace")]

    kept = apply_predicate(issues, lambda issue: issue.rule != "line_length")

    assert [issue.rule for issue in kept] == ["trailing_whitespace"]


def test_predicate_errors_propagate(make_issue) -> None:
    def explode(issue):
        raise KeyError(issue.rule)

    with pytest.raises(KeyError):
        apply_predicate([make_issue()], explode)


def test_partition_is_stable_and_disjoint(make_issue) -> None:
    issues = [
        make_issue("error", line=1),
        make_issue("warning", line=2),
        make_issue("note", line=3),
        make_issue("error", line=4),
        make_issue("warning", line=5),
    ]

    partition = partition_issues(issues)

    assert [issue.line for issue in partition.warnings] == [2, 5]
    assert [issue.line for issue in partition.errors] == [1, 4]
    assert [issue.line for issue in partition.unknown] == [3]
    assert not set(map(id, partition.warnings)) & set(map(id, partition.errors))
    assert not partition.empty


def test_partition_of_only_unknown_is_empty(make_issue) -> None:
    partition = partition_issues([make_issue("info")])

    assert partition.empty
    assert len(partition.unknown) == 1
