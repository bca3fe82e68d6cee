# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recursive directory loader delegating files to registered loaders."""

from __future__ import annotations

import logging
from pathlib import Path

from ..collection import SourceCollection
from ..config import LoaderConfig
from ..errors import SourceIOError
from ..hashing import ContentHasher
from ..paths import LoaderRoot, Pathish
from ..source import ContentReader
from .base import SourceLoader, unsupported
from .file import FileSourceLoader

LOGGER = logging.getLogger(__name__)


class DirectorySourceLoader(SourceLoader):
    """Walk a directory tree depth-first, merging every recognised file.

    Directory children are recursed into; other children are offered to the
    registered file loaders in registration order and the first loader that
    supports a child loads it. Children no loader supports are skipped.

    Symbolic links are followed but entries are named by the link's own path.
    A link cycle inside the root recurses without bound.
    """

    def __init__(
        self,
        root: Pathish,
        *,
        config: LoaderConfig | None = None,
        hasher: ContentHasher | None = None,
        reader: ContentReader | None = None,
    ) -> None:
        """Create a directory loader bound to ``root``.

        Args:
            root: Directory that bounds traversal and anchors origins.
            config: Optional loader configuration shared with the file loader.
            hasher: Optional hasher handed to produced sources.
            reader: Optional content reader handed to produced sources.
        """

        self._root = LoaderRoot.from_path(root)
        self.root = self._root.lexical
        self.config = config or LoaderConfig()
        self._loaders: list[SourceLoader] = [
            FileSourceLoader(self.root, config=self.config, hasher=hasher, reader=reader),
        ]

    @property
    def identifier(self) -> str:
        """Return the identifier for the directory loader."""

        return "directory"

    @property
    def loaders(self) -> tuple[SourceLoader, ...]:
        """Return the file-level loaders in the order they are tried."""

        return tuple(self._loaders)

    def add_loader(self, loader: SourceLoader) -> None:
        """Register ``loader`` after the existing file-level loaders.

        Args:
            loader: Loader offered directory children no earlier loader supports.
        """

        self._loaders.append(loader)

    def supports(self, name: Pathish) -> bool:
        """Return whether ``name`` is a directory inside the root.

        With ``config.deep_supports`` every nested directory must pass the
        same check.

        Args:
            name: Absolute path or path relative to the root.

        Returns:
            bool: ``True`` when :meth:`load` accepts ``name``.
        """

        path = self._root.locate(name)
        if not self._is_local_directory(path):
            return False
        if not self.config.deep_supports:
            return True
        return self._subtree_is_local(path)

    def load(self, name: Pathish) -> SourceCollection:
        """Load every recognised file beneath ``name``.

        Args:
            name: Absolute path or path relative to the root.

        Returns:
            SourceCollection: Sources in depth-first, pre-order walk order.

        Raises:
            InvalidSourceError: If ``name`` or a nested directory is rejected.
            SourceIOError: If a directory cannot be enumerated.
        """

        if not self.supports(name):
            raise unsupported(name)
        return self._walk(self._root.locate(name))

    def _walk(self, directory: Path) -> SourceCollection:
        """Collect sources beneath an already validated ``directory``.

        Children keep their lexical paths, so entries reached through a
        symbolic link are named by the link rather than its target.

        Args:
            directory: Lexical path of a directory inside the root.

        Returns:
            SourceCollection: Sources in depth-first, pre-order walk order.

        Raises:
            InvalidSourceError: If a nested directory leads outside the root.
            SourceIOError: If a directory cannot be enumerated.
        """

        LOGGER.debug("walking directory %s", directory)
        collection = SourceCollection()
        for child in self._entries(directory):
            if not child.is_dir():
                self._load_file(child, collection)
                continue
            if not self._root.contains(child):
                raise unsupported(child)
            collection.merge(self._walk(child))
        return collection

    def _is_local_directory(self, path: Path) -> bool:
        return self._root.contains(path) and path.is_dir()

    def _subtree_is_local(self, directory: Path) -> bool:
        """Return whether every directory beneath ``directory`` stays inside the root.

        Args:
            directory: Lexical path of a directory inside the root.

        Returns:
            bool: ``False`` when any nested directory escapes the root or
            cannot be enumerated.
        """

        try:
            children = list(directory.iterdir())
        except OSError:
            return False
        for child in children:
            if not child.is_dir():
                continue
            if not self._is_local_directory(child) or not self._subtree_is_local(child):
                return False
        return True

    def _load_file(self, child: Path, collection: SourceCollection) -> None:
        """Offer ``child`` to the registered loaders, skipping it if none match.

        Args:
            child: Non-directory entry of the directory being walked.
            collection: Collection receiving the loaded sources.
        """

        for loader in self._loaders:
            if loader.supports(child):
                loader.load_into(child, collection)
                return
        LOGGER.debug("skipping unsupported entry %s", child)

    def _entries(self, path: Path) -> list[Path]:
        """Return the direct children of ``path``.

        Args:
            path: Directory to enumerate.

        Returns:
            list[Path]: Children sorted by name when ``config.sort_entries``
            is set, otherwise in filesystem enumeration order.

        Raises:
            SourceIOError: If the directory cannot be read.
        """

        try:
            entries = list(path.iterdir())
        except OSError as exc:
            raise SourceIOError(exc) from exc
        if self.config.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return entries


__all__ = ["DirectorySourceLoader"]
