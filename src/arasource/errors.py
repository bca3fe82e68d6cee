# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy raised by source collections and loaders."""

from __future__ import annotations


class SourceError(Exception):
    """Base class for recoverable source loading failures."""


class SourceNotFoundError(SourceError):
    """Raised when a collection lookup matches no source."""

    def __init__(self, key: str) -> None:
        """Record the lookup ``key`` that produced no match.

        Args:
            key: Stringified index or origin that was queried.
        """

        super().__init__(f"source `{key}` not found.")
        self.key = key


class InvalidSourceError(SourceError):
    """Raised when a loader is asked to load a name it does not support."""

    def __init__(self, message: str) -> None:
        """Initialise the error with a human-readable ``message``.

        Args:
            message: Description of the rejected name.
        """

        super().__init__(f"invalid source: {message}")
        self.message = message


class SourceIOError(SourceError):
    """Raised when the filesystem fails during enumeration or content reads."""

    def __init__(self, error: OSError | UnicodeDecodeError) -> None:
        """Wrap the underlying ``error``.

        Args:
            error: Original exception raised by the filesystem layer.
        """

        super().__init__(f"io error: {error}")
        self.error = error


class SourceStateError(RuntimeError):
    """Raised when a source has neither a backing path nor inline content."""


__all__ = [
    "InvalidSourceError",
    "SourceError",
    "SourceIOError",
    "SourceNotFoundError",
    "SourceStateError",
]
