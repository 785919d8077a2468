# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering Tailor output parsing."""

from __future__ import annotations

import json

import pytest

from tailor_review.errors import TailorOutputError
from tailor_review.parsers import OutputSchema, detect_schema, parse_tailor_output
from tailor_review.severity import Severity

FILES_DOCUMENT = json.dumps(
    {
        "files": [
            {
                "path": "/a/Foo.swift",
                "violations": [
                    {
                        "message": "Line too long",
                        "rule": "line_length",
                        "location": {"line": 12},
                        "severity": "warning",
                    }
                ],
            }
        ]
    }
)


def test_parse_files_document() -> None:
    issues = parse_tailor_output(FILES_DOCUMENT, target="/a/Foo.swift")

    assert len(issues) == 1
    issue = issues[0]
    assert issue.path == "/a/Foo.swift"
    assert issue.line == 12
    assert issue.rule == "line_length"
    assert issue.message == "Line too long"
    assert issue.severity is Severity.WARNING


def test_files_document_backfills_each_entry_path() -> None:
    payload = {
        "files": [
            {"path": "/a/One.swift", "violations": [{"rule": "r1", "location": {"line": 1}, "severity": "error"}]},
            {"path": "/a/Two.swift", "violations": []},
            {
                "path": "/a/Three.swift",
                "violations": [
                    {"path": "/a/Explicit.swift", "rule": "r2", "location": {"line": 2}, "severity": "warning"},
                    {"rule": "r3", "location": {"line": 3}, "severity": "warning"},
                ],
            },
        ]
    }

    issues = parse_tailor_output(json.dumps(payload), target=".")

    assert [(issue.path, issue.rule) for issue in issues] == [
        ("/a/One.swift", "r1"),
        ("/a/Explicit.swift", "r2"),
        ("/a/Three.swift", "r3"),
    ]


def test_parse_legacy_array_backfills_target() -> None:
    payload = [
        {"message": "Trailing whitespace", "rule": "trailing_whitespace", "location": {"line": 4}, "severity": "error"},
        {"path": "/b/Other.swift", "message": "m", "rule": "r", "location": {"line": "7"}, "severity": "info"},
    ]

    issues = parse_tailor_output(json.dumps(payload), target="/b/Bar.swift")

    assert issues[0].path == "/b/Bar.swift"
    assert issues[0].severity is Severity.ERROR
    assert issues[1].path == "/b/Other.swift"
    assert issues[1].line == 7
    assert issues[1].severity is Severity.UNKNOWN


def test_parse_is_deterministic() -> None:
    assert parse_tailor_output(FILES_DOCUMENT, target="x") == parse_tailor_output(FILES_DOCUMENT, target="x")


def test_blank_output_has_no_issues() -> None:
    assert parse_tailor_output("  \n", target="x") == []


def test_invalid_json_names_the_invocation() -> None:
    with pytest.raises(TailorOutputError) as excinfo:
        parse_tailor_output("{not json", target="/a/Broken.swift")

    assert excinfo.value.target == "/a/Broken.swift"
    assert "/a/Broken.swift" in str(excinfo.value)


def test_unknown_schema_is_rejected() -> None:
    assert detect_schema({"summary": {}}) is None
    assert detect_schema([]) is OutputSchema.LEGACY
    with pytest.raises(TailorOutputError):
        parse_tailor_output('{"summary": {}}', target="x")
