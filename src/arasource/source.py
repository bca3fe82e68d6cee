# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Addressable source records with lazy, cached content."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Final

from .errors import SourceIOError, SourceStateError
from .hashing import ContentHasher, default_hasher

DEFAULT_NAME: Final[str] = "<unknown>"
_SOURCE_ENCODING: Final[str] = "utf-8"

ContentReader = Callable[[Path], str]


class SourceKind(str, Enum):
    """Classify a source as executable code or foreign declarations."""

    # Declarations of foreign symbols (e.g. from PHP); never executed.
    DEFINITION = "definition"
    SCRIPT = "script"


class ContentState(str, Enum):
    """Describe where a source's content currently comes from."""

    UNLOADED = "unloaded"
    LOADED = "loaded"
    INLINE = "inline"


def read_source_text(path: Path) -> str:
    """Read ``path`` fully into memory as UTF-8 text.

    Args:
        path: Absolute path of the source file.

    Returns:
        str: Decoded file contents.
    """

    return path.read_text(encoding=_SOURCE_ENCODING)


class Source:
    """Reference to one unit of code, located on disk or supplied inline.

    Located sources carry a ``root`` and ``origin`` and read their content on
    first access, caching it until :meth:`dispose_content` is called. Inline
    sources carry their content from construction and never touch the disk.
    """

    __slots__ = ("_content", "_digest", "_hasher", "_kind", "_origin", "_reader", "_root", "_state")

    def __init__(
        self,
        kind: SourceKind,
        root: Path | str,
        origin: str,
        *,
        hasher: ContentHasher | None = None,
        reader: ContentReader | None = None,
    ) -> None:
        """Create a located source whose content is loaded lazily.

        Args:
            kind: Classification of the source.
            root: Directory the source was resolved under.
            origin: Slash-separated path of the source relative to ``root``.
            hasher: Optional hasher used for :meth:`content_hash`.
            reader: Optional callable used to read the backing file.
        """

        self._kind = kind
        self._root: Path | None = Path(root)
        self._origin: str | None = origin
        self._content: str | None = None
        self._state = ContentState.UNLOADED
        self._digest: int | None = None
        self._hasher = hasher
        self._reader = reader

    @classmethod
    def inline(
        cls,
        kind: SourceKind,
        content: str,
        *,
        origin: str | None = None,
        hasher: ContentHasher | None = None,
    ) -> Source:
        """Create a source carrying ``content`` directly.

        Args:
            kind: Classification of the source.
            content: Source text owned by the new record.
            origin: Optional name used for lookups; anonymous when omitted.
            hasher: Optional hasher used for :meth:`content_hash`.

        Returns:
            Source: Inline source with no backing path.
        """

        source = cls.__new__(cls)
        source._kind = kind
        source._root = None
        source._origin = origin
        source._content = content
        source._state = ContentState.INLINE
        source._digest = None
        source._hasher = hasher
        source._reader = None
        return source

    @property
    def kind(self) -> SourceKind:
        """Return the classification assigned at construction."""

        return self._kind

    @property
    def root(self) -> Path | None:
        """Return the directory this source was resolved under, if any."""

        return self._root

    @property
    def origin(self) -> str | None:
        """Return the identity key used for lookups, if any."""

        return self._origin

    @property
    def state(self) -> ContentState:
        """Return the current :class:`ContentState`."""

        return self._state

    @property
    def name(self) -> str:
        """Return the origin, or a placeholder for anonymous sources."""

        return self._origin if self._origin is not None else DEFAULT_NAME

    @property
    def source_path(self) -> Path | None:
        """Return ``root / origin`` when both are present, otherwise ``None``."""

        if self._root is None or self._origin is None:
            return None
        return self._root.joinpath(self._origin)

    def content(self) -> str:
        """Return the source text, reading it from disk on first access.

        Returns:
            str: Cached or freshly read content.

        Raises:
            SourceIOError: If the backing file cannot be read or decoded.
            SourceStateError: If the source has no content and no backing path.
        """

        if self._content is not None:
            return self._content
        path = self.source_path
        if path is None:
            raise SourceStateError(f"source `{self.name}` has neither content nor a backing path")
        reader = self._reader or read_source_text
        try:
            content = reader(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceIOError(exc) from exc
        self._content = content
        self._state = ContentState.LOADED
        self._digest = None
        return content

    def content_hash(self) -> int:
        """Return the 64-bit fingerprint of :meth:`content`.

        Returns:
            int: Digest computed by the configured hasher and cached until
            the content is disposed.

        Raises:
            SourceIOError: If lazily loading the content fails.
        """

        content = self.content()
        if self._digest is None:
            hasher = self._hasher or default_hasher()
            self._digest = hasher.hash(content)
        return self._digest

    def dispose_content(self) -> None:
        """Drop cached content so it is re-read on next access.

        Inline sources have no backing store and keep their content.
        """

        if self._state is not ContentState.LOADED:
            return
        self._content = None
        self._digest = None
        self._state = ContentState.UNLOADED

    def __repr__(self) -> str:
        return f"Source(kind={self._kind.value!r}, name={self.name!r}, state={self._state.value!r})"


__all__ = [
    "DEFAULT_NAME",
    "ContentReader",
    "ContentState",
    "Source",
    "SourceKind",
    "read_source_text",
]
