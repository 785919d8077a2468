# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem helpers."""

from __future__ import annotations

from .paths import absolute_path, is_within, iter_subtree, path_in_subtrees, relative_display_path

__all__ = ["absolute_path", "is_within", "iter_subtree", "path_in_subtrees", "relative_display_path"]
