# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source loaders and the top-level directory loading entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..collection import SourceCollection
from ..config import LoaderConfig
from ..hashing import ContentHasher
from ..paths import Pathish
from .base import SourceLoader, unsupported
from .directory import DirectorySourceLoader
from .file import FileSourceLoader

LOGGER = logging.getLogger(__name__)

__all__ = [
    "DirectorySourceLoader",
    "FileSourceLoader",
    "SourceLoader",
    "load_directories",
    "unsupported",
]


def load_directories(
    root: Pathish,
    directories: Iterable[Pathish],
    *,
    config: LoaderConfig | None = None,
    hasher: ContentHasher | None = None,
) -> SourceCollection:
    """Load every directory in ``directories`` into one collection.

    Directories are processed in the given order and the first failure is
    raised immediately.

    Args:
        root: Project root bounding traversal and anchoring origins.
        directories: Directories to load, absolute or relative to ``root``.
        config: Optional loader configuration.
        hasher: Optional hasher handed to produced sources.

    Returns:
        SourceCollection: Aggregate of all loaded sources.

    Raises:
        InvalidSourceError: If a directory is not a directory inside ``root``.
        SourceIOError: If the filesystem fails during the walk.
    """

    loader = DirectorySourceLoader(root, config=config, hasher=hasher)
    collection = SourceCollection()
    for directory in directories:
        before = len(collection)
        loader.load_into(directory, collection)
        LOGGER.debug("loaded %d sources from %s", len(collection) - before, directory)
    return collection
