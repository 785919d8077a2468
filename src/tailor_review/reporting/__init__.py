# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for Tailor issues."""

from __future__ import annotations

from .host import Annotation, ConsoleReviewHost, GitHubActionsHost, RecordingReviewHost, ReviewHost
from .markdown import inline_message, markdown_issues, other_issues_message, render_summary
from .reporter import report_issues

__all__ = [
    "Annotation",
    "ConsoleReviewHost",
    "GitHubActionsHost",
    "RecordingReviewHost",
    "ReviewHost",
    "inline_message",
    "markdown_issues",
    "other_issues_message",
    "render_summary",
    "report_issues",
]
