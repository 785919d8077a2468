# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wrapper around the Tailor executable."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from .core.runtime.process import CommandOptions, run_command
from .errors import TailorExecutionError
from .filesystem.paths import absolute_path

LOGGER = logging.getLogger(__name__)

DEFAULT_TAILOR_PATH: Final[Path] = Path("/usr/local/bin/tailor")

OptionValue = str | int | float | bool | Path | None


def build_arguments(options: Mapping[str, OptionValue], extra_args: str = "") -> list[str]:
    """Translate an options mapping into Tailor command-line arguments.

    ``None`` values are skipped, ``True`` becomes a bare ``--flag``, ``False``
    becomes ``--no-flag`` and underscores in keys become hyphens. ``extra_args``
    is split with shell quoting rules and appended verbatim.

    Args:
        options: Option names mapped to their values.
        extra_args: Free-form arguments supplied by the caller.

    Returns:
        list[str]: Argument list, excluding the executable.
    """

    arguments: list[str] = []
    for key, value in options.items():
        if value is None:
            continue
        name = key.replace("_", "-")
        if value is True:
            arguments.append(f"--{name}")
        elif value is False:
            arguments.append(f"--no-{name}")
        else:
            arguments.extend([f"--{name}", str(value)])
    arguments.extend(shlex.split(extra_args))
    return arguments


class TailorBinary:
    """Run Tailor and capture its output."""

    def __init__(self, binary_path: str | Path | None = None, *, base_dir: Path | None = None) -> None:
        self._binary_path = absolute_path(binary_path, base_dir=base_dir) if binary_path else None

    @property
    def path(self) -> Path:
        """Return the executable location, falling back to the default install path."""
        return self._binary_path or DEFAULT_TAILOR_PATH

    def installed(self) -> bool:
        """Return ``True`` when the executable exists."""
        return self.path.exists()

    def command(self, target: str, options: Mapping[str, OptionValue], extra_args: str = "") -> list[str]:
        """Return the full command used to lint ``target``."""
        return [str(self.path), *build_arguments(options, extra_args), target]

    def run(
        self,
        target: str,
        options: Mapping[str, OptionValue],
        extra_args: str = "",
        *,
        cwd: Path | None = None,
    ) -> str:
        """Lint ``target`` and return Tailor's standard output.

        A non-zero exit status is expected whenever violations exist and is not
        treated as a failure.

        Args:
            target: File (or directory) passed to Tailor.
            options: Option mapping converted by :func:`build_arguments`.
            extra_args: Additional caller-supplied arguments.
            cwd: Working directory for the Tailor process.

        Returns:
            str: Captured standard output.

        Raises:
            TailorExecutionError: If the Tailor process cannot be started.
        """

        cmd = self.command(target, options, extra_args)
        try:
            completed = run_command(cmd, options=CommandOptions(cwd=cwd, capture_output=True, text=True, check=False))
        except OSError as exc:
            raise TailorExecutionError(target, str(exc)) from exc
        if completed.returncode != 0:
            LOGGER.debug("tailor exited with %s for %s: %s", completed.returncode, target, completed.stderr)
        return completed.stdout or ""


__all__ = ["DEFAULT_TAILOR_PATH", "OptionValue", "TailorBinary", "build_arguments"]
