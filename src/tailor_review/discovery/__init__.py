# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the Swift files handed to Tailor."""

from __future__ import annotations

from .git import GitFileStatus, GitStatusProvider
from .selector import SOURCE_SUFFIX, candidate_files, select_source_files

__all__ = [
    "SOURCE_SUFFIX",
    "GitFileStatus",
    "GitStatusProvider",
    "candidate_files",
    "select_source_files",
]
