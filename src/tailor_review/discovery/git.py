# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-based change detection used when no explicit files are given."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.runtime.process import CommandOptions, run_command

GitRunner = Callable[[Sequence[str], Path], list[str]]


@runtime_checkable
class GitFileStatus(Protocol):
    """Expose the file lists a review host reports for the change under review."""

    @property
    def modified_files(self) -> Sequence[str]:
        """Return paths modified by the change."""
        ...

    @property
    def deleted_files(self) -> Sequence[str]:
        """Return paths deleted by the change."""
        ...

    @property
    def added_files(self) -> Sequence[str]:
        """Return paths added by the change."""
        ...


class GitStatusProvider:
    """Collect modified, deleted and added files from the local repository."""

    def __init__(self, root: Path | None = None, *, base_ref: str = "HEAD", runner: GitRunner | None = None) -> None:
        """Create a provider diffing the working tree against ``base_ref``.

        Args:
            root: Directory git commands run from. Defaults to the current
                working directory.
            base_ref: Revision the working tree is compared with.
            runner: Optional command runner used to execute git commands.
        """

        self._root = root or Path.cwd()
        self._base_ref = base_ref
        self._runner = runner or self._default_runner

    @property
    def modified_files(self) -> list[str]:
        return self._diff("M")

    @property
    def deleted_files(self) -> list[str]:
        return self._diff("D")

    @property
    def added_files(self) -> list[str]:
        added = self._diff("A")
        untracked = self._lines(["git", "ls-files", "--others", "--exclude-standard"])
        return added + [path for path in untracked if path not in added]

    def _diff(self, diff_filter: str) -> list[str]:
        cmd = ["git", "diff", "--name-only", "--relative", f"--diff-filter={diff_filter}", self._base_ref, "--"]
        return self._lines(cmd)

    def _lines(self, cmd: Sequence[str]) -> list[str]:
        return [
            str(self._root / stripped)
            for stripped in (raw.strip() for raw in self._runner(cmd, self._root))
            if stripped
        ]

    @staticmethod
    def _default_runner(cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` returning stdout lines; git failures yield no lines.

        Args:
            cmd: Git command to execute.
            root: Repository directory.

        Returns:
            list[str]: Raw stdout lines produced by the command.
        """

        try:
            cp = run_command(cmd, options=CommandOptions(cwd=root, capture_output=True, text=True, check=False))
        except FileNotFoundError:
            return []
        if cp.returncode != 0:
            return []
        return (cp.stdout or "").splitlines()


__all__ = ["GitFileStatus", "GitRunner", "GitStatusProvider"]
