# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Review plugin that lints changed Swift files with Tailor.

Typical use from a CI step::

    plugin = TailorPlugin(host=GitHubActionsHost(), max_num_violations=50)
    outcome = plugin.report(inline_mode=True, fail_on_error=True)

Without an explicit ``files`` selection the plugin lints the Swift files the
change modifies or adds. Paths listed under ``excluded``/``included`` in
``.tailor.yml`` narrow the selection further.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .aggregate import cap_issues, run_tailor
from .config import load_review_config
from .core.logging import ReviewLogger
from .discovery.git import GitFileStatus, GitStatusProvider
from .discovery.selector import FileSelection, select_source_files
from .errors import TailorNotInstalledError
from .filesystem.paths import absolute_path
from .filtering import IssuePredicate, apply_predicate, partition_issues
from .models import ReportOutcome
from .reporting.host import ConsoleReviewHost, ReviewHost
from .reporting.reporter import report_issues
from .tool import OptionValue, TailorBinary


@dataclass(slots=True)
class TailorPlugin:
    """Run Tailor over a change and report its violations."""

    binary_path: str | Path | None = None
    """Tailor executable; defaults to ``/usr/local/bin/tailor``."""
    config_file: str | Path | None = None
    """Tailor configuration file; defaults to ``.tailor.yml`` when present."""
    directory: str | Path | None = None
    """Directory Tailor runs from; only files inside it are linted."""
    verbose: bool = False
    max_num_violations: int | None = None
    lint_all_files: bool = False
    host: ReviewHost = field(default_factory=ConsoleReviewHost)
    git: GitFileStatus | None = None
    cwd: Path | None = None

    def report(
        self,
        files: FileSelection = None,
        *,
        inline_mode: bool = False,
        fail_on_error: bool = False,
        additional_tailor_args: str = "",
        select: IssuePredicate | None = None,
    ) -> ReportOutcome:
        """Lint the selected files and report the violations to :attr:`host`.

        Args:
            files: Glob pattern or list of patterns; ``None`` lints the files
                changed according to :attr:`git`.
            inline_mode: Annotate each line instead of posting one summary.
            fail_on_error: Fail the check when Tailor reports an error.
            additional_tailor_args: Extra arguments appended to every Tailor call.
            select: Predicate keeping only the issues it returns ``True`` for.

        Returns:
            ReportOutcome: Terminal state of the check and issue counters.

        Raises:
            TailorNotInstalledError: If the Tailor executable does not exist.
            TailorExecutionError: If the Tailor process cannot be started.
            TailorOutputError: If Tailor emits output that cannot be parsed.
        """

        cwd = self.cwd or Path.cwd()
        tool = TailorBinary(self.binary_path, base_dir=cwd)
        if not tool.installed():
            raise TailorNotInstalledError(tool.path)

        logger = ReviewLogger(verbose=self.verbose)

        config = load_review_config(self.config_file, cwd=cwd)
        logger.log(f"Using config file: {config.source}")

        root = absolute_path(self.directory, base_dir=cwd) if self.directory else cwd
        logger.log(f"Tailor will be run from {root}")
        logger.log(f"Tailor will exclude the following paths: {[str(path) for path in config.excluded]}")
        logger.log(f"Tailor includes the following paths: {[str(path) for path in config.included]}")

        git = self.git
        if files is None and git is None:
            git = GitStatusProvider(cwd)
        selected = select_source_files(
            root,
            files,
            excluded=config.excluded,
            included=config.included,
            git=git,
            cwd=cwd,
        )
        logger.log(f"Tailor will lint the following files: {', '.join(str(path) for path in selected)}")

        options: dict[str, OptionValue] = {
            "config": str(config.source) if config.source else None,
            "format": "json",
        }
        logger.log("linting with options: " + " ".join(f"{key}={value}" for key, value in options.items()))

        issues = run_tailor(
            selected,
            tool,
            options,
            additional_tailor_args,
            root=root,
            lint_all_files=self.lint_all_files,
        )
        capped = cap_issues(issues, self.max_num_violations)
        logger.log(f"Received from Tailor: issues={len(issues)} kept={len(capped.issues)}")

        partition = partition_issues(apply_predicate(capped.issues, select))
        if partition.unknown:
            logger.warn(f"Tailor reported {len(partition.unknown)} issue(s) with an unrecognised severity; skipping them")

        return report_issues(
            self.host,
            partition,
            inline_mode=inline_mode,
            fail_on_error=fail_on_error,
            other_issues_count=capped.other_issues_count,
            root=root,
        )


__all__ = ["TailorPlugin"]
