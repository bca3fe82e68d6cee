# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered, append-only aggregate of :class:`~arasource.source.Source` records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import SourceNotFoundError
from .source import Source


class SourceCollection:
    """Ordered sources, addressable by 1-based position or by origin."""

    __slots__ = ("_sources",)

    def __init__(self, sources: Iterable[Source] = ()) -> None:
        """Create a collection seeded with ``sources`` in iteration order.

        Args:
            sources: Optional initial sources.
        """

        self._sources: list[Source] = list(sources)

    @property
    def sources(self) -> tuple[Source, ...]:
        """Return a read-only snapshot of the sources in insertion order."""

        return tuple(self._sources)

    def add(self, source: Source) -> None:
        """Append ``source`` to the end of the collection.

        Args:
            source: Source record to append.
        """

        self._sources.append(source)

    def get(self, index: int) -> Source:
        """Return the source at 1-based ``index``.

        Args:
            index: Position of the source, starting at ``1``.

        Returns:
            Source: Source stored at ``index``.

        Raises:
            SourceNotFoundError: If ``index`` lies outside ``1..len(self)``.
        """

        if index < 1 or index > len(self._sources):
            raise SourceNotFoundError(str(index))
        return self._sources[index - 1]

    def named(self, origin: str) -> Source:
        """Return the first source whose origin equals ``origin``.

        Args:
            origin: Origin to look up.

        Returns:
            Source: First matching source in insertion order.

        Raises:
            SourceNotFoundError: If no source has that exact origin.
        """

        for source in self._sources:
            if source.origin == origin:
                return source
        raise SourceNotFoundError(origin)

    def merge(self, other: SourceCollection) -> None:
        """Move every source from ``other`` to the end of this collection.

        ``other`` is left empty.

        Args:
            other: Donor collection.

        Raises:
            ValueError: If ``other`` is this collection.
        """

        if other is self:
            raise ValueError("cannot merge a source collection into itself")
        self._sources.extend(other._sources)
        other._sources.clear()

    def origins(self) -> list[str]:
        """Return the origins of named sources in insertion order."""

        return [source.origin for source in self._sources if source.origin is not None]

    def __iter__(self) -> Iterator[Source]:
        return iter(tuple(self._sources))

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, source: object) -> bool:
        return any(candidate is source for candidate in self._sources)

    def __repr__(self) -> str:
        return f"SourceCollection({self._sources!r})"


__all__ = ["SourceCollection"]
