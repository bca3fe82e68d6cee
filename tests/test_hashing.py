# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for content hashers."""

from __future__ import annotations

import hashlib

import pytest

from arasource import Blake2bHasher, ContentHasher, default_hasher


def test_blake2b_hasher_is_deterministic_64_bit() -> None:
    hasher = Blake2bHasher()

    first = hasher.hash("function main(): void {}")
    second = Blake2bHasher().hash("function main(): void {}")

    assert first == second
    assert 0 <= first < 2**64


def test_blake2b_hasher_distinguishes_content() -> None:
    hasher = Blake2bHasher()

    assert hasher.hash("a") != hasher.hash("b")
    assert hasher.hash("") != hasher.hash(" ")


def test_default_hasher_is_shared_content_hasher() -> None:
    assert default_hasher() is default_hasher()
    assert isinstance(default_hasher(), ContentHasher)
    assert default_hasher() == Blake2bHasher()


def test_duck_typed_hasher_satisfies_protocol() -> None:
    class LengthHasher:
        def hash(self, content: str) -> int:
            return len(content)

    assert isinstance(LengthHasher(), ContentHasher)


def test_blake2b_hasher_marks_digest_as_non_security(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    original = hashlib.blake2b

    def _recording_blake2b(data: bytes, **kwargs: object):
        calls.append(kwargs)
        return original(data, **kwargs)

    monkeypatch.setattr(hashlib, "blake2b", _recording_blake2b)

    Blake2bHasher().hash("function main(): void {}")

    assert calls == [{"digest_size": 8, "usedforsecurity": False}]
