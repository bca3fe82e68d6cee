# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for loading several directories under one root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from arasource import ContentState, InvalidSourceError, SourceKind, SourceNotFoundError, load_directories


def test_loads_scripts_and_definitions(project_root: Path) -> None:
    collection = load_directories(project_root, ["src", "vendor/foo", "vendor/bar"])

    assert len(collection) == 3
    assert collection.named("src/main.ara").kind is SourceKind.SCRIPT
    assert collection.named("vendor/foo/write_line.d.ara").kind is SourceKind.DEFINITION
    assert collection.named("vendor/bar/bar.d.ara").kind is SourceKind.DEFINITION


def test_directory_order_is_preserved(project_root: Path) -> None:
    collection = load_directories(project_root, ["vendor/bar", "src", "vendor/foo"])

    assert collection.origins() == [
        "vendor/bar/bar.d.ara",
        "src/main.ara",
        "vendor/foo/write_line.d.ara",
    ]
    assert collection.get(2) is collection.named("src/main.ara")


def test_absolute_directories_and_lazy_content(project_root: Path) -> None:
    collection = load_directories(
        str(project_root),
        [project_root / "src", str(project_root / "vendor" / "foo"), project_root / "vendor" / "bar"],
    )

    assert all(source.state is ContentState.UNLOADED for source in collection)
    for source in collection:
        assert source.content() == (project_root / source.name).read_text(encoding="utf-8")
        assert source.state is ContentState.LOADED


def test_unrecognised_files_are_absent(project_root: Path) -> None:
    (project_root / "src" / "notes.txt").write_text("not code", encoding="utf-8")

    collection = load_directories(project_root, ["src"])

    assert collection.origins() == ["src/main.ara"]
    with pytest.raises(SourceNotFoundError):
        collection.named("src/notes.txt")


def test_first_failure_is_raised(project_root: Path) -> None:
    with pytest.raises(InvalidSourceError) as excinfo:
        load_directories(project_root, ["src", "missing", "vendor"])

    assert "missing" in excinfo.value.message


def test_empty_directory_list_yields_empty_collection(project_root: Path) -> None:
    assert len(load_directories(project_root, [])) == 0


def test_debug_logging_reports_progress(project_root: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="arasource"):
        load_directories(project_root, ["src"])

    messages = [record.getMessage() for record in caplog.records]
    assert "loaded script source src/main.ara" in messages
    assert "loaded 1 sources from src" in messages


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinked_sources_are_reachable_by_link_origin(project_root: Path) -> None:
    (project_root / "src" / "alias.ara").symlink_to(project_root / "vendor" / "bar" / "bar.d.ara")
    (project_root / "src" / "lib").symlink_to(project_root / "vendor" / "foo", target_is_directory=True)

    collection = load_directories(project_root, ["src"])

    assert collection.origins() == ["src/alias.ara", "src/lib/write_line.d.ara", "src/main.ara"]
    alias = collection.named("src/alias.ara")
    assert alias.kind is SourceKind.SCRIPT
    assert alias.content() == (project_root / "vendor" / "bar" / "bar.d.ara").read_text(encoding="utf-8")
