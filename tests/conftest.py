# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from tailor_review.models import Issue
from tailor_review.reporting.host import RecordingReviewHost

_STUB_SCRIPT = """#!/bin/sh
here="$(cd "$(dirname "$0")" && pwd)"
echo "$@" >> "$here/calls.log"
pwd >> "$here/cwd.log"
for arg in "$@"; do last="$arg"; done
if [ -f "$last.tailor.json" ]; then
  cat "$last.tailor.json"
elif [ "$last" = "." ] && [ -f "$here/all.json" ]; then
  cat "$here/all.json"
fi
exit 1
"""


@dataclass(slots=True)
class TailorStub:
    """Executable standing in for Tailor.

    It prints ``<target>.tailor.json`` when present (``all.json`` next to the
    stub for ``.``) and records its arguments and working directory.
    """

    path: Path

    def respond(self, target: Path, payload: object) -> None:
        target.with_name(target.name + ".tailor.json").write_text(json.dumps(payload), encoding="utf-8")

    def respond_all(self, payload: object) -> None:
        (self.path.parent / "all.json").write_text(json.dumps(payload), encoding="utf-8")

    def invocations(self) -> list[str]:
        log = self.path.parent / "calls.log"
        return log.read_text(encoding="utf-8").splitlines() if log.exists() else []

    def working_dirs(self) -> list[str]:
        log = self.path.parent / "cwd.log"
        return log.read_text(encoding="utf-8").splitlines() if log.exists() else []


@pytest.fixture
def tailor_stub(tmp_path: Path) -> TailorStub:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "tailor"
    script.write_text(_STUB_SCRIPT, encoding="utf-8")
    script.chmod(0o755)
    return TailorStub(path=script)


@pytest.fixture
def host() -> RecordingReviewHost:
    return RecordingReviewHost()


@pytest.fixture
def make_issue() -> Callable[..., Issue]:
    def _make(
        severity: str = "warning",
        *,
        path: str = "/repo/Sources/Foo.swift",
        line: int = 1,
        message: str = "Line too long",
        rule: str = "line_length",
    ) -> Issue:
        return Issue(path=path, line=line, message=message, rule=rule, severity=severity)

    return _make

