# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for invoking Tailor across files and capping the results."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import pytest

from tailor_review.aggregate import LINT_ALL_TARGET, cap_issues, run_tailor
from tailor_review.errors import TailorOutputError


class FakeTailor:
    """Return canned output per target and record the calls made."""

    def __init__(self, outputs: Mapping[str, str]) -> None:
        self.outputs = dict(outputs)
        self.calls: list[tuple[str, Path | None]] = []

    def run(self, target: str, options, extra_args: str = "", *, cwd: Path | None = None) -> str:
        self.calls.append((target, cwd))
        return self.outputs.get(target, "")


def _document(path: str, *rules: str, severity: str = "warning") -> str:
    violations = [
        {"message": f"{rule} message", "rule": rule, "location": {"line": index + 1}, "severity": severity}
        for index, rule in enumerate(rules)
    ]
    return json.dumps({"files": [{"path": path, "violations": violations}]})


def test_run_tailor_preserves_invocation_then_output_order(tmp_path: Path) -> None:
    tool = FakeTailor(
        {
            "/r/B.swift": _document("/r/B.swift", "b1", "b2"),
            "/r/A.swift": _document("/r/A.swift", "a1", severity="error"),
            "/r/Clean.swift": "",
        }
    )

    issues = run_tailor(
        [Path("/r/B.swift"), Path("/r/Clean.swift"), Path("/r/A.swift")],
        tool,
        {"format": "json"},
        root=tmp_path,
    )

    assert [issue.rule for issue in issues] == ["b1", "b2", "a1"]
    assert [call[0] for call in tool.calls] == ["/r/B.swift", "/r/Clean.swift", "/r/A.swift"]
    assert all(call[1] == tmp_path for call in tool.calls)


def test_run_tailor_lint_all_files_runs_once(tmp_path: Path) -> None:
    payload = {
        "files": [
            {"path": "/r/A.swift", "violations": [{"rule": "a", "location": {"line": 1}, "severity": "warning"}]},
            {"path": "/r/B.swift", "violations": [{"rule": "b", "location": {"line": 2}, "severity": "warning"}]},
        ]
    }
    tool = FakeTailor({LINT_ALL_TARGET: json.dumps(payload)})

    issues = run_tailor([Path("/r/ignored.swift")], tool, {}, root=tmp_path, lint_all_files=True)

    assert [issue.path for issue in issues] == ["/r/A.swift", "/r/B.swift"]
    assert tool.calls == [(LINT_ALL_TARGET, tmp_path)]


def test_run_tailor_aborts_on_malformed_output(tmp_path: Path) -> None:
    tool = FakeTailor({"/r/A.swift": "oops", "/r/B.swift": _document("/r/B.swift", "b")})

    with pytest.raises(TailorOutputError) as excinfo:
        run_tailor([Path("/r/A.swift"), Path("/r/B.swift")], tool, {}, root=tmp_path)

    assert excinfo.value.target == "/r/A.swift"
    assert [call[0] for call in tool.calls] == ["/r/A.swift"]


def test_cap_issues_truncates_and_counts(make_issue) -> None:
    issues = [make_issue(line=line) for line in (1, 2, 3)]

    capped = cap_issues(issues, 1)

    assert capped.issues == issues[:1]
    assert capped.other_issues_count == 2


@pytest.mark.parametrize("cap", [None, 3, 10])
def test_cap_issues_keeps_everything_within_limit(make_issue, cap: int | None) -> None:
    issues = [make_issue(line=line) for line in (1, 2, 3)]

    capped = cap_issues(issues, cap)

    assert capped.issues == issues
    assert capped.other_issues_count == 0


def test_run_tailor_is_deterministic_for_captured_output(tmp_path: Path) -> None:
    outputs = {
        "/r/A.swift": _document("/r/A.swift", "a1", "a2"),
        "/r/B.swift": _document("/r/B.swift", "b1", severity="error"),
    }
    files = [Path("/r/A.swift"), Path("/r/B.swift")]

    first = run_tailor(files, FakeTailor(outputs), {"format": "json"}, root=tmp_path)
    second = run_tailor(files, FakeTailor(outputs), {"format": "json"}, root=tmp_path)

    assert first == second
    assert [issue.rule for issue in first] == ["a1", "a2", "b1"]
