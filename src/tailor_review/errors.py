# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the review pipeline."""

from __future__ import annotations

from pathlib import Path


class TailorReviewError(RuntimeError):
    """Base class for failures that abort a review run."""


class TailorNotInstalledError(TailorReviewError):
    """Raised when the Tailor executable cannot be found."""

    def __init__(self, binary_path: Path) -> None:
        """Initialise the error with the path that was probed.

        Args:
            binary_path: Location where the Tailor executable was expected.
        """

        super().__init__(f"tailor is not installed (looked for {binary_path})")
        self.binary_path = binary_path


class TailorOutputError(TailorReviewError):
    """Raised when Tailor emits output that cannot be interpreted."""

    def __init__(self, target: str, detail: str) -> None:
        """Initialise the error with the offending invocation.

        Args:
            target: File (or ``.``) the failing invocation linted.
            detail: Human-readable description of the parse failure.
        """

        super().__init__(f"Unable to parse Tailor output for {target}: {detail}")
        self.target = target
        self.detail = detail


class TailorExecutionError(TailorReviewError):
    """Raised when the Tailor process cannot be started."""

    def __init__(self, target: str, detail: str) -> None:
        """Initialise the error with the invocation that could not start.

        Args:
            target: File (or ``.``) the invocation was meant to lint.
            detail: Operating system error reported while launching Tailor.
        """

        super().__init__(f"Unable to run Tailor for {target}: {detail}")
        self.target = target
        self.detail = detail


__all__ = ["TailorExecutionError", "TailorNotInstalledError", "TailorOutputError", "TailorReviewError"]
