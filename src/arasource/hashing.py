# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Content fingerprinting used for change detection."""

from __future__ import annotations

import hashlib
from abc import abstractmethod
from functools import lru_cache
from typing import Final, Protocol, runtime_checkable

_HASH_ENCODING: Final[str] = "utf-8"
_DIGEST_SIZE: Final[int] = 8


@runtime_checkable
class ContentHasher(Protocol):
    """Stateless hashing capability producing a 64-bit digest."""

    @abstractmethod
    def hash(self, content: str) -> int:
        """Return an unsigned 64-bit fingerprint for ``content``.

        Args:
            content: Source text to fingerprint.

        Returns:
            int: Digest in the range ``0 <= value < 2**64``.
        """

        ...


class Blake2bHasher(ContentHasher):
    """Default hasher: BLAKE2b truncated to an eight-byte digest.

    The digest is a non-cryptographic fingerprint for spotting changed
    content. BLAKE2b is the fastest digest ``hashlib`` ships, and the call is
    flagged ``usedforsecurity=False`` so FIPS-restricted interpreters accept it.
    Digests are never used as identity keys.
    """

    def hash(self, content: str) -> int:
        """Return the 64-bit BLAKE2b digest of ``content``.

        Args:
            content: Source text to fingerprint.

        Returns:
            int: Unsigned integer built from the big-endian digest bytes.
        """

        digest = hashlib.blake2b(
            content.encode(_HASH_ENCODING),
            digest_size=_DIGEST_SIZE,
            usedforsecurity=False,
        ).digest()
        return int.from_bytes(digest, "big")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Blake2bHasher)

    def __hash__(self) -> int:
        return hash(Blake2bHasher)


@lru_cache(maxsize=1)
def default_hasher() -> ContentHasher:
    """Return the process-wide default :class:`ContentHasher`.

    Returns:
        ContentHasher: Shared :class:`Blake2bHasher` instance.
    """

    return Blake2bHasher()


__all__ = ["Blake2bHasher", "ContentHasher", "default_hasher"]
