# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about filesystem paths."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str] | Path


def absolute_path(path: _Pathish, *, base_dir: _Pathish | None = None) -> Path:
    """Return ``path`` as an absolute, normalised path without resolving symlinks.

    Args:
        path: Filesystem path supplied by the caller.
        base_dir: Directory relative paths are anchored to. Defaults to the
            current working directory.

    Returns:
        Path: Absolute path with ``..`` and ``.`` segments collapsed.
    """

    raw = Path(path).expanduser()
    if not raw.is_absolute():
        base = Path.cwd() if base_dir is None else Path(base_dir).expanduser()
        raw = base / raw
    return Path(os.path.normpath(raw))


def is_within(path: Path, root: Path) -> bool:
    """Return ``True`` when ``path`` equals ``root`` or lives below it."""

    return path == root or root in path.parents


def iter_subtree(path: Path) -> Iterator[Path]:
    """Yield ``path`` and, for directories, every entry below it.

    A regular file yields a single element. Symlinked directories are not
    followed.

    Args:
        path: File or directory to enumerate.

    Yields:
        Path: ``path`` itself followed by every nested file and directory.
    """

    yield path
    if not path.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(path):
        base = Path(dirpath)
        for name in sorted(dirnames):
            yield base / name
        for name in sorted(filenames):
            yield base / name


def path_in_subtrees(candidate: Path, roots: Iterable[Path]) -> bool:
    """Return whether ``candidate`` is enumerated under any of ``roots``.

    Matching is exact equality between the candidate and the enumerated
    entries, so configured paths that no longer exist never match.

    Args:
        candidate: Absolute file path being filtered.
        roots: Configured files or directories.

    Returns:
        bool: ``True`` when ``candidate`` appears in at least one subtree.
    """

    return any(candidate in iter_subtree(root) for root in roots)


def relative_display_path(path: _Pathish, root: Path) -> str:
    """Return ``path`` relative to ``root`` when nested, otherwise unchanged.

    Args:
        path: File path reported by Tailor.
        root: Directory Tailor was run from.

    Returns:
        str: POSIX-style path suitable for review-host annotations.
    """

    candidate = Path(path)
    if candidate.is_absolute():
        try:
            return candidate.relative_to(root).as_posix()
        except ValueError:
            return candidate.as_posix()
    return candidate.as_posix()


__all__ = ["absolute_path", "is_within", "iter_subtree", "path_in_subtrees", "relative_display_path"]
