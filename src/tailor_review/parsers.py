# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse Tailor JSON output into :class:`~tailor_review.models.Issue` objects."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Any

from .errors import TailorOutputError
from .models import Issue

JsonValue = Any


class OutputSchema(str, Enum):
    """Known shapes of Tailor's JSON output."""

    LEGACY = "legacy"
    FILES = "files"


def iter_dicts(value: JsonValue) -> Iterator[Mapping[str, JsonValue]]:
    """Yield mapping items from ``value`` when it is a sequence of dict-like objects."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for item in value:
            if isinstance(item, Mapping):
                yield item


def coerce_optional_int(value: JsonValue) -> int | None:
    """Return ``value`` as an ``int`` when it holds a whole number."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def detect_schema(payload: JsonValue) -> OutputSchema | None:
    """Return the schema ``payload`` follows, or ``None`` when unrecognised.

    A top-level array is the legacy flat list of violations; an object with a
    ``files`` array holds violations grouped per file.
    """

    if isinstance(payload, list):
        return OutputSchema.LEGACY
    if isinstance(payload, Mapping) and isinstance(payload.get("files"), list):
        return OutputSchema.FILES
    return None


def build_issue(record: Mapping[str, JsonValue], *, default_path: str) -> Issue:
    """Convert one violation record into an :class:`Issue`.

    Args:
        record: Violation object emitted by Tailor.
        default_path: Path used when the record does not name its file.

    Returns:
        Issue: Parsed issue.
    """

    location = record.get("location")
    line = coerce_optional_int(location.get("line")) if isinstance(location, Mapping) else None
    path = record.get("path")
    return Issue(
        path=path if isinstance(path, str) and path else default_path,
        line=line,
        message=str(record.get("message") or ""),
        rule=str(record.get("rule") or ""),
        severity=record.get("severity"),
    )


def parse_tailor_output(stdout: str, *, target: str) -> list[Issue]:
    """Parse the output of one Tailor invocation.

    Args:
        stdout: Raw standard output captured from Tailor.
        target: File (or ``.``) the invocation linted; used to backfill paths
            and to identify the invocation in errors.

    Returns:
        list[Issue]: Issues in the order Tailor reported them.

    Raises:
        TailorOutputError: If the output is not valid JSON or matches no known schema.
    """

    text = stdout.strip()
    if not text:
        return []
    try:
        payload: JsonValue = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TailorOutputError(target, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    schema = detect_schema(payload)
    if schema is OutputSchema.LEGACY:
        return [build_issue(record, default_path=target) for record in iter_dicts(payload)]
    if schema is OutputSchema.FILES:
        issues: list[Issue] = []
        for entry in iter_dicts(payload["files"]):
            file_path = entry.get("path")
            default_path = file_path if isinstance(file_path, str) and file_path else target
            issues.extend(build_issue(record, default_path=default_path) for record in iter_dicts(entry.get("violations")))
        return issues
    raise TailorOutputError(target, "expected a list of violations or an object with a 'files' list")


__all__ = [
    "OutputSchema",
    "build_issue",
    "coerce_optional_int",
    "detect_schema",
    "iter_dicts",
    "parse_tailor_output",
]
