# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

MAIN_SCRIPT = "function main(): void {\n    write_line('hello');\n}\n"
WRITE_LINE_DEFINITION = "function write_line(string $line): void;\n"
BAR_DEFINITION = "function bar(): void;\n"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a project tree with one script and two vendored definitions."""

    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "vendor" / "foo").mkdir(parents=True)
    (root / "vendor" / "bar").mkdir(parents=True)
    (root / "src" / "main.ara").write_text(MAIN_SCRIPT, encoding="utf-8")
    (root / "vendor" / "foo" / "write_line.d.ara").write_text(WRITE_LINE_DEFINITION, encoding="utf-8")
    (root / "vendor" / "bar" / "bar.d.ara").write_text(BAR_DEFINITION, encoding="utf-8")
    return root


class CountingReader:
    """Content reader recording every path it is asked to read."""

    def __init__(self) -> None:
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> str:
        self.calls.append(path)
        return path.read_text(encoding="utf-8")


@pytest.fixture
def counting_reader() -> CountingReader:
    """Return a fresh :class:`CountingReader`."""

    return CountingReader()

