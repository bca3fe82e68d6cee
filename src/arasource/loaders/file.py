# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Loader turning a single source file into one located source."""

from __future__ import annotations

import logging
from pathlib import Path

from ..collection import SourceCollection
from ..config import LoaderConfig
from ..hashing import ContentHasher
from ..paths import LoaderRoot, Pathish
from ..source import ContentReader, Source, SourceKind
from .base import SourceLoader, unsupported

LOGGER = logging.getLogger(__name__)


class FileSourceLoader(SourceLoader):
    """Recognise script files under a root and wrap them as lazy sources."""

    def __init__(
        self,
        root: Pathish,
        *,
        config: LoaderConfig | None = None,
        hasher: ContentHasher | None = None,
        reader: ContentReader | None = None,
    ) -> None:
        """Create a file loader bound to ``root``.

        Args:
            root: Directory used to resolve relative names and compute origins.
            config: Optional extension configuration.
            hasher: Optional hasher handed to produced sources.
            reader: Optional content reader handed to produced sources.
        """

        self._root = LoaderRoot.from_path(root)
        self.root = self._root.lexical
        self.config = config or LoaderConfig()
        self._hasher = hasher
        self._reader = reader

    @property
    def identifier(self) -> str:
        """Return the identifier for the file loader."""

        return "file"

    def supports(self, name: Pathish) -> bool:
        """Return whether ``name`` is an existing script file inside the root.

        Args:
            name: Absolute path or path relative to the root.

        Returns:
            bool: ``True`` for regular files carrying the script extension.
        """

        path = self._root.locate(name)
        if path.suffix != self.config.script_suffix:
            return False
        return self._root.contains(path) and path.is_file()

    def load(self, name: Pathish) -> SourceCollection:
        """Return a one-element collection holding the source for ``name``.

        Content is not read here; the produced source loads it on demand.

        Args:
            name: Absolute path or path relative to the root.

        Returns:
            SourceCollection: Collection containing a single located source.

        Raises:
            InvalidSourceError: If :meth:`supports` rejects ``name``.
        """

        path = self._root.locate(name)
        origin = self._root.origin(path)
        if origin is None or not self.supports(path):
            raise unsupported(name)
        kind = self.classify(path)
        LOGGER.debug("loaded %s source %s", kind.value, origin)
        source = Source(kind, self.root, origin, hasher=self._hasher, reader=self._reader)
        return SourceCollection([source])

    def classify(self, path: Path) -> SourceKind:
        """Return the :class:`SourceKind` implied by ``path``'s file name.

        Args:
            path: Lexical path of a supported file; a symbolic link is
                classified by its own name, not its target's.

        Returns:
            SourceKind: ``DEFINITION`` for the compound definition suffix,
            otherwise ``SCRIPT``.
        """

        if path.name.endswith(self.config.definition_suffix):
            return SourceKind.DEFINITION
        return SourceKind.SCRIPT


__all__ = ["FileSourceLoader"]
