# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compute the set of Swift files Tailor should lint."""

from __future__ import annotations

import glob
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from ..filesystem.paths import absolute_path, is_within, path_in_subtrees
from .git import GitFileStatus

SOURCE_SUFFIX: Final[str] = ".swift"

FileSelection = str | Path | Sequence[str | Path] | None


def _expand_patterns(patterns: Iterable[str | Path], cwd: Path) -> list[str]:
    matches: list[str] = []
    for pattern in patterns:
        matches.extend(sorted(glob.glob(str(pattern), root_dir=cwd, recursive=True)))
    return matches


def candidate_files(files: FileSelection, *, git: GitFileStatus | None, cwd: Path) -> list[str]:
    """Return the raw file list before any filtering.

    Args:
        files: Glob pattern, list of patterns/paths, or ``None`` to use the
            files changed according to ``git``.
        git: Change provider consulted when ``files`` is ``None``.
        cwd: Directory glob patterns are evaluated from.

    Returns:
        list[str]: Candidate paths, possibly relative to ``cwd``.
    """

    if files is None:
        if git is None:
            return []
        deleted = set(git.deleted_files)
        modified = [path for path in git.modified_files if path not in deleted]
        return [*modified, *git.added_files]
    if isinstance(files, (str, Path)):
        return _expand_patterns([files], cwd)
    return _expand_patterns(files, cwd)


def select_source_files(
    root: Path,
    files: FileSelection = None,
    *,
    excluded: Sequence[Path] = (),
    included: Sequence[Path] = (),
    git: GitFileStatus | None = None,
    cwd: Path | None = None,
) -> list[Path]:
    """Return the ordered, de-duplicated Swift files to lint.

    Filters apply in order: Swift suffix, absolute normalisation, de-duplication,
    existence, containment in ``root``, exclusion, then inclusion. A file under
    an excluded path is dropped even when it is also included.

    Args:
        root: Directory Tailor runs from; files outside it are ignored.
        files: Explicit selection (see :func:`candidate_files`).
        excluded: Files or directories whose subtrees are never linted.
        included: When non-empty, only files within these subtrees are linted.
        git: Change provider used when ``files`` is ``None``.
        cwd: Directory relative inputs are resolved from.

    Returns:
        list[Path]: Absolute file paths in first-seen order.
    """

    base = cwd or Path.cwd()
    root = absolute_path(root, base_dir=base)
    selected: list[Path] = []
    seen: set[Path] = set()
    for raw in candidate_files(files, git=git, cwd=base):
        if not str(raw).endswith(SOURCE_SUFFIX):
            continue
        path = absolute_path(raw, base_dir=base)
        if path in seen:
            continue
        seen.add(path)
        if not path.exists():
            continue
        if not is_within(path, root):
            continue
        if path_in_subtrees(path, excluded):
            continue
        if included and not path_in_subtrees(path, included):
            continue
        selected.append(path)
    return selected


__all__ = ["SOURCE_SUFFIX", "FileSelection", "candidate_files", "select_source_files"]
