# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for locating loader names relative to a root directory.

Two views of every name are kept apart: the *lexical* path, which is the
name joined onto the root and normalised without touching the filesystem,
and the *resolved* path, which follows symbolic links. Origins always come
from the lexical path so that a link keeps its own identity; only the
containment check looks at the resolved path.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

Pathish = str | PathLike[str] | Path


def best_effort_resolve(path: Path) -> Path:
    """Return ``path`` resolved where possible without raising.

    Args:
        path: Candidate path to resolve.

    Returns:
        Path: Absolute variant when resolution succeeds; otherwise the closest
        achievable approximation.

    """

    try:
        return path.resolve(strict=False)
    except (OSError, RuntimeError):
        return path.absolute() if not path.is_absolute() else path


def lexical_path(name: Pathish, base: Path) -> Path:
    """Return ``name`` joined onto ``base`` and normalised lexically.

    Symbolic links are not followed, so ``..`` segments collapse textually.

    Args:
        name: File or directory name supplied to a loader.
        base: Absolute directory that relative names are joined onto.

    Returns:
        Path: Absolute, normalised path naming the same entry as ``name``.

    """

    candidate = Path(name).expanduser()
    if not candidate.is_absolute():
        candidate = base / candidate
    return Path(os.path.normpath(candidate))


@dataclass(frozen=True, slots=True)
class LoaderRoot:
    """Root directory of a loader, as given and as resolved.

    Attributes:
        lexical: Absolute, normalised root exactly as the caller named it.
        resolved: The same directory with symbolic links resolved.
    """

    lexical: Path
    resolved: Path

    @classmethod
    def from_path(cls, root: Pathish) -> LoaderRoot:
        """Build a :class:`LoaderRoot` for ``root``.

        Args:
            root: Root directory, absolute or relative to the working directory.

        Returns:
            LoaderRoot: Lexical and resolved views of ``root``.
        """

        lexical = lexical_path(root, Path.cwd())
        return cls(lexical=lexical, resolved=best_effort_resolve(lexical))

    def locate(self, name: Pathish) -> Path:
        """Return the lexical absolute path of ``name`` under this root.

        Args:
            name: Absolute path or path relative to the root.

        Returns:
            Path: Normalised path; symbolic links are left in place.
        """

        return lexical_path(name, self.lexical)

    def contains(self, path: Path) -> bool:
        """Return whether ``path`` names an entry inside the root's subtree.

        The path must lie under the root both lexically, so an origin can be
        derived, and after resolution, so links cannot escape the root.

        Args:
            path: Lexical path produced by :meth:`locate`.

        Returns:
            bool: ``True`` when ``path`` is the root or one of its descendants.
        """

        if self.origin(path) is None:
            return False
        return best_effort_resolve(path).is_relative_to(self.resolved)

    def origin(self, path: Path) -> str | None:
        """Return ``path`` as a POSIX path relative to the root.

        Absolute names may be spelled through either view of the root.

        Args:
            path: Lexical path produced by :meth:`locate`.

        Returns:
            str | None: Slash-separated relative path, ``"."`` for the root
            itself, or ``None`` when ``path`` lies outside both views.
        """

        for base in (self.lexical, self.resolved):
            if path.is_relative_to(base):
                return path.relative_to(base).as_posix()
        return None


__all__ = ["LoaderRoot", "Pathish", "best_effort_resolve", "lexical_path"]
