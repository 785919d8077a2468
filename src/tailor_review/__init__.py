# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Post Tailor lint findings as code-review comments."""

from __future__ import annotations

from importlib import metadata

from .errors import TailorExecutionError, TailorNotInstalledError, TailorOutputError, TailorReviewError
from .models import Issue, ReportOutcome
from .plugin import TailorPlugin
from .severity import Severity

__all__ = [
    "Issue",
    "ReportOutcome",
    "Severity",
    "TailorExecutionError",
    "TailorNotInstalledError",
    "TailorOutputError",
    "TailorPlugin",
    "TailorReviewError",
    "__version__",
]

try:
    __version__ = metadata.version("tailor-review")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
