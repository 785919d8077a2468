# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate and load the Tailor configuration file used for path filtering."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

import yaml

from .filesystem.paths import absolute_path
from .models import ReviewConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME: Final[str] = ".tailor.yml"
EXCLUDED_KEY: Final[str] = "excluded"
INCLUDED_KEY: Final[str] = "included"


def resolve_config_path(explicit: str | Path | None, *, cwd: Path | None = None) -> Path | None:
    """Return the configuration file governing this run.

    Args:
        explicit: Path configured by the caller, used verbatim when provided.
        cwd: Directory searched for the conventional ``.tailor.yml``.

    Returns:
        Path | None: Absolute configuration path, or ``None`` when no file applies.
    """

    base = cwd or Path.cwd()
    if explicit:
        return absolute_path(explicit, base_dir=base)
    candidate = base / DEFAULT_CONFIG_FILENAME
    if candidate.is_file():
        return absolute_path(candidate)
    return None


def load_config_mapping(path: Path | None) -> dict[str, Any]:
    """Load the YAML mapping stored at ``path``.

    Missing, unreadable or malformed documents degrade to an empty mapping so
    that configuration problems never abort a review.

    Args:
        path: Configuration file location, or ``None``.

    Returns:
        dict[str, Any]: Parsed mapping (empty when nothing usable was found).
    """

    if path is None or not path.exists():
        return {}
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        LOGGER.debug("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(payload, Mapping):
        LOGGER.debug("ignoring config %s: top-level value is not a mapping", path)
        return {}
    return {str(key): value for key, value in payload.items()}


def _coerce_entries(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(entry) for entry in value if entry is not None]
    return []


def format_paths(entries: object, config_path: Path | None) -> tuple[Path, ...]:
    """Resolve configured path entries against the configuration directory.

    Args:
        entries: Raw ``excluded``/``included`` value from the YAML document.
        config_path: Configuration file the entries came from.

    Returns:
        tuple[Path, ...]: Absolute paths that exist on disk.
    """

    base = config_path.parent if config_path is not None else Path.cwd()
    resolved = (absolute_path(entry, base_dir=base) for entry in _coerce_entries(entries))
    return tuple(path for path in resolved if path.exists())


def load_review_config(explicit: str | Path | None = None, *, cwd: Path | None = None) -> ReviewConfig:
    """Resolve, load and normalise the review path filters.

    Args:
        explicit: Optional configuration path supplied by the caller.
        cwd: Directory searched for the default configuration file.

    Returns:
        ReviewConfig: Excluded and included paths for file selection.
    """

    config_path = resolve_config_path(explicit, cwd=cwd)
    mapping = load_config_mapping(config_path)
    return ReviewConfig(
        source=config_path,
        excluded=format_paths(mapping.get(EXCLUDED_KEY), config_path),
        included=format_paths(mapping.get(INCLUDED_KEY), config_path),
    )


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "format_paths",
    "load_config_mapping",
    "load_review_config",
    "resolve_config_path",
]
