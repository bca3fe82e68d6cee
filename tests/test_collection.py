# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ordered source collection."""

from __future__ import annotations

import pytest

from arasource import Source, SourceCollection, SourceKind, SourceNotFoundError


def _named(origin: str) -> Source:
    return Source.inline(SourceKind.SCRIPT, f"function {origin}(): void {{}}", origin=origin)


def test_get_and_named_return_same_source() -> None:
    collection = SourceCollection()
    foo = _named("foo.ara")
    bar = _named("bar.ara")
    collection.add(foo)
    collection.add(bar)

    assert collection.get(1) is foo
    assert collection.get(2) is bar
    assert collection.named("foo.ara") is foo
    assert collection.named("bar.ara") is collection.get(2)
    assert len(collection) == 2


@pytest.mark.parametrize("index", [0, 3, -1])
def test_get_out_of_range_raises(index: int) -> None:
    collection = SourceCollection([_named("foo.ara"), _named("bar.ara")])

    with pytest.raises(SourceNotFoundError) as excinfo:
        collection.get(index)

    assert excinfo.value.key == str(index)
    assert str(excinfo.value) == f"source `{index}` not found."


def test_named_missing_raises_with_origin_key() -> None:
    collection = SourceCollection([_named("foo.ara")])

    with pytest.raises(SourceNotFoundError) as excinfo:
        collection.named("baz.ara")

    assert excinfo.value.key == "baz.ara"


def test_named_returns_first_match_in_insertion_order() -> None:
    first = _named("dup.ara")
    second = _named("dup.ara")
    collection = SourceCollection([first, second])

    assert collection.named("dup.ara") is first


def test_named_ignores_anonymous_sources() -> None:
    collection = SourceCollection([Source.inline(SourceKind.SCRIPT, "echo 1;")])

    with pytest.raises(SourceNotFoundError):
        collection.named("<unknown>")


def test_merge_appends_in_order_and_empties_donor() -> None:
    collection = SourceCollection([_named("foo.ara"), _named("bar.ara")])
    other = SourceCollection([_named("baz.ara")])
    expected = [*collection.sources, *other.sources]

    collection.merge(other)

    assert list(collection.sources) == expected
    assert collection.origins() == ["foo.ara", "bar.ara", "baz.ara"]
    assert len(other) == 0
    with pytest.raises(SourceNotFoundError):
        other.get(1)
    with pytest.raises(SourceNotFoundError):
        other.named("baz.ara")


def test_merge_into_itself_is_rejected() -> None:
    collection = SourceCollection([_named("foo.ara")])

    with pytest.raises(ValueError):
        collection.merge(collection)

    assert len(collection) == 1


def test_membership_uses_identity() -> None:
    source = _named("foo.ara")
    lookalike = _named("foo.ara")
    collection = SourceCollection([source])

    assert source in collection
    assert lookalike not in collection


def test_sources_snapshot_is_read_only() -> None:
    collection = SourceCollection([_named("foo.ara")])
    snapshot = collection.sources

    collection.add(_named("bar.ara"))

    assert len(snapshot) == 1
    assert [source.origin for source in collection] == ["foo.ara", "bar.ara"]


def test_hash_collisions_do_not_affect_lookup() -> None:
    class ConstantHasher:
        def hash(self, content: str) -> int:
            return 7

    first = Source.inline(SourceKind.SCRIPT, "a", origin="a.ara", hasher=ConstantHasher())
    second = Source.inline(SourceKind.SCRIPT, "b", origin="b.ara", hasher=ConstantHasher())
    collection = SourceCollection([first])
    collection.merge(SourceCollection([second]))

    assert first.content_hash() == second.content_hash()
    assert collection.named("a.ara") is first
    assert collection.named("b.ara") is second
    assert len(collection) == 2
