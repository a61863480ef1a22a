"""
Entry model for the proof registry.

An Entry is the record stored under a digest. It is a frozen dataclass: once
constructed it never changes, and copies with content stripped are produced
with ``dataclasses.replace``.
"""

from __future__ import annotations

import base64
import dataclasses
from dataclasses import dataclass

# 2 MiB, inclusive
MAX_CONTENT_SIZE = 2 * 1024 * 1024


@dataclass(frozen=True)
class Entry:
    """Stored proof of existence for a single digest.

    Attributes:
        digest: Caller-supplied identifier the entry is keyed by.
        submitter: Principal of the caller that registered the digest.
        created_at: Registration time in nanoseconds since the Unix epoch.
        content: Raw file bytes, or ``None`` when not stored or stripped.
        content_type: MIME type reported by the caller.
        name: Display name of the file.
        description: Free-form description.
        owner_name: Name of the content owner.
        owner_dob: Owner's date of birth, stored as given.
        royalty_fee: Royalty fee, stored as given.
        has_royalty: Whether a royalty applies.
        contact_details: How to contact the owner.
    """

    digest: str
    submitter: str
    created_at: int
    content: bytes | None = dataclasses.field(default=None, repr=False)
    content_type: str = ""
    name: str = ""
    description: str = ""
    owner_name: str = ""
    owner_dob: str = ""
    royalty_fee: str = ""
    has_royalty: bool = False
    contact_details: str = ""

    def without_content(self) -> Entry:
        """Return a copy of this entry with ``content`` reported absent."""
        if self.content is None:
            return self
        return dataclasses.replace(self, content=None)

    def to_dict(self) -> dict:
        """
        Serialize the entry for JSON transport.

        Content is base64 encoded; absent content is serialized as ``None``.

        Example:
            >>> Entry("h1", "2vxsx-fae", 1, b"abc").to_dict()["content"]
            'YWJj'
        """
        data = dataclasses.asdict(self)
        if self.content is not None:
            data["content"] = base64.b64encode(self.content).decode("ascii")
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Entry:
        """Inverse of ``to_dict``."""
        fields = {f.name: data[f.name] for f in dataclasses.fields(cls) if f.name in data}
        if fields.get("content") is not None:
            fields["content"] = base64.b64decode(fields["content"])
        return cls(**fields)
