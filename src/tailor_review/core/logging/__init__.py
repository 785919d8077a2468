# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers."""

from __future__ import annotations

from .public import ReviewLogger, emoji, fail, ok, warn

__all__ = ["ReviewLogger", "emoji", "fail", "ok", "warn"]
