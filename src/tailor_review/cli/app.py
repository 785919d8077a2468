# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..core.logging import fail, ok, warn
from ..errors import TailorReviewError
from ..plugin import TailorPlugin
from ..reporting.host import ConsoleReviewHost, GitHubActionsHost, ReviewHost

app = typer.Typer(
    name="tailor-review",
    help="Lint changed Swift files with Tailor and report the violations.",
    add_completion=False,
    no_args_is_help=True,
)


class HostChoice(str, Enum):
    """Review hosts selectable from the command line."""

    CONSOLE = "console"
    GITHUB = "github"


def _build_host(choice: HostChoice, *, use_emoji: bool) -> ReviewHost:
    if choice is HostChoice.GITHUB:
        return GitHubActionsHost()
    return ConsoleReviewHost(use_emoji=use_emoji)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tailor-review {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Lint changed Swift files with Tailor and report the violations."""


@app.command("report")
def report_command(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Glob patterns or paths to lint. Defaults to files changed in git."),
    ] = None,
    inline: Annotated[bool, typer.Option("--inline", help="Annotate individual lines instead of a summary.")] = False,
    fail_on_error: Annotated[bool, typer.Option("--fail-on-error", help="Fail when Tailor reports errors.")] = False,
    tailor_args: Annotated[str, typer.Option("--tailor-args", help="Extra arguments passed to Tailor.")] = "",
    binary_path: Annotated[Path | None, typer.Option("--binary-path", help="Tailor executable.")] = None,
    config: Annotated[Path | None, typer.Option("--config", help="Tailor configuration file.")] = None,
    directory: Annotated[Path | None, typer.Option("--directory", help="Directory Tailor runs from.")] = None,
    max_violations: Annotated[
        int | None,
        typer.Option("--max-violations", min=0, help="Maximum number of violations to report."),
    ] = None,
    lint_all_files: Annotated[bool, typer.Option("--lint-all-files", help="Lint the whole directory in one pass.")] = False,
    host: Annotated[HostChoice, typer.Option("--host", case_sensitive=False, help="Where to send results.")] = (
        HostChoice.CONSOLE
    ),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each pipeline stage.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in output.")] = False,
) -> None:
    """Run Tailor and report its violations.

    Exit status is 0 when the check passes, 1 when it fails and 2 when Tailor
    is missing or its output cannot be parsed.
    """

    use_emoji = not no_emoji
    plugin = TailorPlugin(
        binary_path=binary_path,
        config_file=config,
        directory=directory,
        verbose=verbose,
        max_num_violations=max_violations,
        lint_all_files=lint_all_files,
        host=_build_host(host, use_emoji=use_emoji),
    )
    try:
        outcome = plugin.report(
            files or None,
            inline_mode=inline,
            fail_on_error=fail_on_error,
            additional_tailor_args=tailor_args,
        )
    except TailorReviewError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=2) from exc

    if outcome.failed:
        raise typer.Exit(code=1)
    if outcome.warnings or outcome.errors:
        warn(f"Tailor reported {outcome.warnings} warning(s) and {outcome.errors} error(s)", use_emoji=use_emoji)
    else:
        ok("Tailor found no issues", use_emoji=use_emoji)


__all__ = ["app", "main", "report_command"]
