"""Tests for the registry write and read operations."""

import pytest

from conftest import register_args
from proofnest.errors import ContentTooLarge, DuplicateDigest
from proofnest.host import CallContext
from proofnest.registry import (
    MAX_CONTENT_SIZE,
    enumerate_all,
    get_full,
    get_metadata,
    register,
)


def test_register_then_get_metadata(store, context):
    register(store, context, "h1", **register_args())

    meta = get_metadata(store, "h1")
    assert meta is not None
    assert meta.content is None
    assert meta.content_type == "text/plain"
    assert meta.name == "doc1"
    assert meta.description == "desc"
    assert meta.owner_name == "Alice"
    assert meta.owner_dob == "2000-01-01"
    assert meta.royalty_fee == "5%"
    assert meta.has_royalty is True
    assert meta.contact_details == "a@x.com"


def test_get_full_returns_fields_and_host_values(store, context):
    register(store, context, "h1", **register_args())

    entry = get_full(store, "h1")
    assert entry.digest == "h1"
    assert entry.content == b"abc"
    assert entry.submitter == "alice-principal"
    assert entry.created_at == context.timestamp


def test_metadata_equals_full_entry_without_content(store, context):
    register(store, context, "h1", **register_args())

    full = get_full(store, "h1")
    meta = get_metadata(store, "h1")
    assert meta.content is None
    assert meta == full.without_content()
    # Stripping a view never touches what is stored
    assert get_full(store, "h1").content == b"abc"


def test_duplicate_digest_rejected_and_original_kept(store, context):
    register(store, context, "h1", **register_args())
    original = get_full(store, "h1")

    other = CallContext(caller="mallory", timestamp=context.timestamp + 1)
    with pytest.raises(DuplicateDigest) as exc_info:
        register(store, other, "h1", **register_args(content=b"xyz", name="forged"))

    assert exc_info.value.digest == "h1"
    assert get_full(store, "h1") == original


def test_content_at_ceiling_is_accepted(store, context):
    content = b"\x00" * MAX_CONTENT_SIZE
    register(store, context, "big", **register_args(content=content))

    assert len(get_full(store, "big").content) == 2 * 1024 * 1024


def test_content_over_ceiling_is_rejected(store, context):
    content = b"\x00" * (MAX_CONTENT_SIZE + 1)
    with pytest.raises(ContentTooLarge) as exc_info:
        register(store, context, "too-big", **register_args(content=content))

    assert exc_info.value.size == MAX_CONTENT_SIZE + 1
    assert exc_info.value.limit == MAX_CONTENT_SIZE
    assert get_full(store, "too-big") is None
    assert not store.contains("too-big")


def test_oversize_content_on_existing_digest_reports_size(store, context):
    register(store, context, "h1", **register_args())
    content = b"\x00" * (MAX_CONTENT_SIZE + 1)

    with pytest.raises(ContentTooLarge):
        register(store, context, "h1", **register_args(content=content))
    assert get_full(store, "h1").content == b"abc"


def test_empty_content_is_stored_as_absent(store, context):
    register(store, context, "empty", **register_args(content=b""))
    register(store, context, "none", **register_args(content=None))

    assert get_full(store, "empty").content is None
    assert get_full(store, "none").content is None


def test_digest_is_not_checked_against_content(store, context):
    register(store, context, "not-a-real-hash", **register_args(content=b"anything"))

    assert get_full(store, "not-a-real-hash").content == b"anything"


def test_reads_on_unknown_digest_are_absent(store):
    assert get_full(store, "missing") is None
    assert get_metadata(store, "missing") is None
    assert enumerate_all(store) == []


def test_enumerate_all_strips_content(store, context):
    register(store, context, "a", **register_args(content=b"aaa"))
    register(store, context, "b", **register_args(content=b"bbb"))
    register(store, context, "c", **register_args(content=None))

    pairs = enumerate_all(store)
    assert sorted(digest for digest, _ in pairs) == ["a", "b", "c"]
    for digest, entry in pairs:
        assert entry.digest == digest
        assert entry.content is None

    # Content is still retrievable individually
    assert get_full(store, "a").content == b"aaa"


def test_enumerate_all_is_a_fresh_snapshot(store, context):
    register(store, context, "a", **register_args())
    first = enumerate_all(store)

    register(store, context, "b", **register_args())
    second = enumerate_all(store)

    assert [d for d, _ in first] == ["a"]
    assert [d for d, _ in second] == ["a", "b"]


def test_metadata_is_stored_verbatim(store, context):
    args = register_args(
        owner_dob="not a date",
        royalty_fee="",
        has_royalty=False,
        contact_details="",
        content_type="whatever/unknown",
    )
    register(store, context, "h2", **args)

    entry = get_full(store, "h2")
    assert entry.owner_dob == "not a date"
    assert entry.royalty_fee == ""
    assert entry.has_royalty is False
    assert entry.content_type == "whatever/unknown"
