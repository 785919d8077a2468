# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the tailor_review package."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import Severity, parse_severity


class Issue(BaseModel):
    """Single violation reported by Tailor."""

    model_config = ConfigDict(frozen=True)

    path: str
    line: int | None = None
    message: str = ""
    rule: str = ""
    severity: Severity = Severity.UNKNOWN

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> Severity:
        return parse_severity(value)

    @property
    def filename(self) -> str:
        """Return the basename of the file the issue points at."""
        return PurePosixPath(self.path).name


class ReviewConfig(BaseModel):
    """Path filters loaded from the Tailor configuration file."""

    model_config = ConfigDict(frozen=True)

    source: Path | None = None
    excluded: tuple[Path, ...] = Field(default_factory=tuple)
    included: tuple[Path, ...] = Field(default_factory=tuple)


class CheckStatus(str, Enum):
    """Terminal state of a review run."""

    PASSED = "passed"
    FAILED = "failed"


FAILURE_MESSAGE = "Failed due to Tailor errors"


class ReportOutcome(BaseModel):
    """Result of reporting a set of issues to the review host."""

    model_config = ConfigDict(frozen=True)

    status: CheckStatus = CheckStatus.PASSED
    message: str | None = None
    warnings: int = 0
    errors: int = 0
    other_issues: int = 0
    unknown: int = 0

    @property
    def failed(self) -> bool:
        """Return ``True`` when the check was marked failed."""
        return self.status is CheckStatus.FAILED


__all__ = ["FAILURE_MESSAGE", "CheckStatus", "Issue", "ReportOutcome", "ReviewConfig"]
