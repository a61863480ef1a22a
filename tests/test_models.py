"""Tests for the Entry model."""

import dataclasses

import pytest

from proofnest.models import Entry


def test_entry_is_immutable():
    entry = Entry(digest="d", submitter="p", created_at=1, content=b"x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "changed"


def test_without_content():
    entry = Entry(digest="d", submitter="p", created_at=1, content=b"x", name="n")
    stripped = entry.without_content()

    assert stripped.content is None
    assert stripped.name == "n"
    assert entry.content == b"x"


def test_to_dict_encodes_content():
    entry = Entry(digest="d", submitter="p", created_at=5, content=b"abc", has_royalty=True)
    data = entry.to_dict()

    assert data["content"] == "YWJj"
    assert data["has_royalty"] is True
    assert data["created_at"] == 5
    assert Entry.from_dict(data) == entry


def test_repr_omits_content():
    entry = Entry(digest="d", submitter="p", created_at=1, content=b"secret bytes")
    assert "secret bytes" not in repr(entry)
