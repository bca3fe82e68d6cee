# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Abstractions for turning names into source collections."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ..collection import SourceCollection
from ..errors import InvalidSourceError
from ..paths import Pathish


@runtime_checkable
class SourceLoader(Protocol):
    """Protocol implemented by source loaders.

    Implementations must keep :meth:`supports` and :meth:`load` consistent:
    when ``supports(name)`` is ``True``, ``load(name)`` never raises
    :class:`~arasource.errors.InvalidSourceError` (it may still raise
    :class:`~arasource.errors.SourceIOError`).
    """

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Return the loader identifier.

        Returns:
            str: Identifier describing the loader implementation.
        """

        ...

    @abstractmethod
    def supports(self, name: Pathish) -> bool:
        """Return whether ``name`` can be loaded by this loader.

        Args:
            name: File path, directory path, or loader-defined address.

        Returns:
            bool: ``True`` when :meth:`load` accepts ``name``.
        """

        ...

    @abstractmethod
    def load(self, name: Pathish) -> SourceCollection:
        """Resolve ``name`` into zero or more sources.

        Args:
            name: File path, directory path, or loader-defined address.

        Returns:
            SourceCollection: Newly loaded sources.

        Raises:
            InvalidSourceError: If :meth:`supports` rejects ``name``.
            SourceIOError: If the underlying storage fails.
        """

        ...

    def load_into(self, name: Pathish, collection: SourceCollection) -> None:
        """Load ``name`` and merge the result into ``collection``.

        Args:
            name: Name passed to :meth:`load`.
            collection: Collection receiving the loaded sources.
        """

        loaded = self.load(name)
        collection.merge(loaded)

    def __call__(self, name: Pathish) -> SourceCollection:
        """Delegate to :meth:`load` enabling callable semantics.

        Args:
            name: Name passed to :meth:`load`.

        Returns:
            SourceCollection: Result of :meth:`load`.
        """

        return self.load(name)


def unsupported(name: Pathish) -> InvalidSourceError:
    """Return the error raised when a loader rejects ``name``.

    Args:
        name: Rejected name.

    Returns:
        InvalidSourceError: Error describing the rejected name.
    """

    return InvalidSourceError(f"source `{name}` is not supported.")


__all__ = ["SourceLoader", "unsupported"]
