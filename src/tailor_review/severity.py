# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels reported by Tailor."""

    ERROR = "error"
    WARNING = "warning"
    UNKNOWN = "unknown"


_SEVERITY_LABELS: Final[dict[str, Severity]] = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
}


def parse_severity(label: object) -> Severity:
    """Map a raw severity label onto :class:`Severity`.

    Only the exact labels Tailor documents (``warning`` and ``error``) are
    recognised; anything else, including other spellings and missing values,
    becomes :attr:`Severity.UNKNOWN`.

    Args:
        label: Raw ``severity`` value taken from a violation record.

    Returns:
        Severity: Normalised severity.
    """

    if isinstance(label, Severity):
        return label
    if not isinstance(label, str):
        return Severity.UNKNOWN
    return _SEVERITY_LABELS.get(label, Severity.UNKNOWN)


__all__ = ["Severity", "parse_severity"]
