# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source acquisition for the Ara toolchain.

Walks project directories, classifies ``.ara`` scripts and ``.d.ara``
definitions, and returns an ordered :class:`SourceCollection` whose sources
load their content lazily.
"""

from __future__ import annotations

from .collection import SourceCollection
from .config import ARA_DEFINITION_EXTENSION, ARA_SCRIPT_EXTENSION, LoaderConfig
from .errors import InvalidSourceError, SourceError, SourceIOError, SourceNotFoundError, SourceStateError
from .hashing import Blake2bHasher, ContentHasher, default_hasher
from .loaders import DirectorySourceLoader, FileSourceLoader, SourceLoader, load_directories
from .source import DEFAULT_NAME, ContentState, Source, SourceKind

__all__ = [
    "ARA_DEFINITION_EXTENSION",
    "ARA_SCRIPT_EXTENSION",
    "DEFAULT_NAME",
    "Blake2bHasher",
    "ContentHasher",
    "ContentState",
    "DirectorySourceLoader",
    "FileSourceLoader",
    "InvalidSourceError",
    "LoaderConfig",
    "Source",
    "SourceCollection",
    "SourceError",
    "SourceIOError",
    "SourceKind",
    "SourceLoader",
    "SourceNotFoundError",
    "SourceStateError",
    "default_hasher",
    "load_directories",
]
