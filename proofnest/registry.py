"""
Registry operations: the write path and the three read projections.

These functions hold the registry's rules. They take the store and, for
writes, the caller's ``CallContext`` explicitly, so they can be exercised
with synthetic identities and timestamps.
"""

import logging

from .errors import ContentTooLarge, DuplicateDigest
from .host import CallContext
from .models import MAX_CONTENT_SIZE, Entry
from .store import RegistryStore

logger = logging.getLogger(__name__)


def register(
    store: RegistryStore,
    context: CallContext,
    digest: str,
    content: bytes | None,
    content_type: str,
    name: str,
    description: str,
    owner_name: str,
    owner_dob: str,
    royalty_fee: str,
    has_royalty: bool,
    contact_details: str,
) -> None:
    """
    Register a digest with its metadata and optional content.

    The digest is opaque: it is never recomputed or checked against
    ``content``. Submitter and creation time come from ``context`` only.

    Args:
        store: Store to insert into
        context: Caller principal and call timestamp supplied by the host
        digest: Key to register
        content: File bytes; empty or ``None`` stores no content
        content_type: MIME type of the content
        name, description, owner_name, owner_dob, royalty_fee,
        has_royalty, contact_details: Descriptive metadata, stored as given

    Raises:
        ContentTooLarge: content exceeds MAX_CONTENT_SIZE; nothing is stored
        DuplicateDigest: digest is already registered; nothing is stored

    Example:
        >>> register(store, CallContext("2vxsx-fae", 1), "h1", b"abc", "text/plain",
        ...          "doc1", "desc", "Alice", "2000-01-01", "5%", True, "a@x.com")
    """
    size = len(content) if content else 0
    if size > MAX_CONTENT_SIZE:
        logger.warning(f"Rejected registration of '{digest}': content is {size} bytes")
        raise ContentTooLarge(size, MAX_CONTENT_SIZE)

    entry = Entry(
        digest=digest,
        submitter=context.caller,
        created_at=context.timestamp,
        content=bytes(content) if content else None,
        content_type=content_type,
        name=name,
        description=description,
        owner_name=owner_name,
        owner_dob=owner_dob,
        royalty_fee=royalty_fee,
        has_royalty=has_royalty,
        contact_details=contact_details,
    )

    try:
        store.insert(digest, entry)
    except DuplicateDigest:
        logger.warning(f"Rejected duplicate registration of '{digest}' by {context.caller}")
        raise

    logger.info(f"Registered '{digest}' for {context.caller} ({size} bytes of content)")


def get_full(store: RegistryStore, digest: str) -> Entry | None:
    """Return the stored entry for ``digest`` including content, or ``None``."""
    entry = store.get(digest)
    if entry is None:
        logger.debug(f"Lookup miss: '{digest}'")
    return entry


def get_metadata(store: RegistryStore, digest: str) -> Entry | None:
    """
    Return the entry for ``digest`` with content always reported absent.

    Meant for verification that does not need the payload.
    """
    entry = get_full(store, digest)
    if entry is None:
        return None
    return entry.without_content()


def enumerate_all(store: RegistryStore) -> list[tuple[str, Entry]]:
    """
    List every registered (digest, Entry) pair with content stripped.

    Content is never included, whatever the size of the registry.
    """
    return [(digest, entry.without_content()) for digest, entry in store.enumerate()]
