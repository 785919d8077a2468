# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration discovery and path normalisation."""

from __future__ import annotations

from pathlib import Path

from tailor_review.config import (
    format_paths,
    load_config_mapping,
    load_review_config,
    resolve_config_path,
)


def test_resolve_config_path_prefers_explicit(tmp_path: Path) -> None:
    (tmp_path / ".tailor.yml").write_text("excluded: []\n", encoding="utf-8")

    resolved = resolve_config_path("custom/tailor.yml", cwd=tmp_path)

    assert resolved == tmp_path / "custom" / "tailor.yml"


def test_resolve_config_path_uses_default_file(tmp_path: Path) -> None:
    assert resolve_config_path(None, cwd=tmp_path) is None

    (tmp_path / ".tailor.yml").write_text("excluded: []\n", encoding="utf-8")

    assert resolve_config_path(None, cwd=tmp_path) == tmp_path / ".tailor.yml"


def test_load_config_mapping_degrades_to_empty(tmp_path: Path) -> None:
    broken = tmp_path / "broken.yml"
    broken.write_text("excluded: [unclosed\n", encoding="utf-8")
    scalar = tmp_path / "scalar.yml"
    scalar.write_text("just a string\n", encoding="utf-8")

    assert load_config_mapping(None) == {}
    assert load_config_mapping(tmp_path / "missing.yml") == {}
    assert load_config_mapping(broken) == {}
    assert load_config_mapping(scalar) == {}


def test_format_paths_resolves_against_config_dir_and_drops_missing(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    (config_dir / "Pods").mkdir(parents=True)
    (config_dir / "Generated.swift").write_text("", encoding="utf-8")
    config_path = config_dir / ".tailor.yml"

    paths = format_paths(["Pods", "./Generated.swift", "Missing", "../config/Pods"], config_path)

    assert paths == (config_dir / "Pods", config_dir / "Generated.swift", config_dir / "Pods")


def test_load_review_config_reads_filters(tmp_path: Path) -> None:
    (tmp_path / "Pods").mkdir()
    (tmp_path / "Sources").mkdir()
    (tmp_path / ".tailor.yml").write_text("excluded:\n  - Pods\nincluded:\n  - Sources\n", encoding="utf-8")

    config = load_review_config(cwd=tmp_path)

    assert config.source == tmp_path / ".tailor.yml"
    assert config.excluded == (tmp_path / "Pods",)
    assert config.included == (tmp_path / "Sources",)


def test_load_review_config_without_file_has_no_filters(tmp_path: Path) -> None:
    config = load_review_config(cwd=tmp_path)

    assert config.source is None
    assert config.excluded == ()
    assert config.included == ()
