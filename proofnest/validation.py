"""
Request parsing and validation for the proof registry HTTP API.

Only the transport shape is checked here (required fields present, booleans
and base64 well formed). Field contents are opaque to the registry and are
never validated.
"""

import base64
import binascii
import hashlib
import logging
from flask import abort

logger = logging.getLogger(__name__)

# Descriptive fields accepted by POST /register, all free-form strings
METADATA_FIELDS = (
    "content_type",
    "name",
    "description",
    "owner_name",
    "owner_dob",
    "royalty_fee",
    "contact_details",
)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


def compute_sha256(data: bytes) -> str:
    """
    Compute the SHA256 hex digest of file contents.

    Used when a file is uploaded without an explicit digest.

    Args:
        data: Bytes to hash

    Returns:
        64 lowercase hex characters

    Example:
        >>> compute_sha256(b"hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    h = hashlib.sha256()
    h.update(data)
    return h.hexdigest()


def require_digest(data) -> str:
    """
    Extract the digest from a request mapping.

    Accepts either ``digest`` or ``hash`` as the key.

    Raises:
        HTTPException: 400 Bad Request if neither is present or it is empty
    """
    digest = data.get("digest") or data.get("hash")
    if not isinstance(digest, str) or not digest:
        logger.warning("Request without digest")
        abort(400, "Hash is required")
    return digest


def parse_bool(value, field: str) -> bool:
    """
    Interpret a JSON boolean or a form string as a bool.

    Raises:
        HTTPException: 400 Bad Request if the value is not a recognised boolean
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    logger.warning(f"Invalid boolean for {field}: {value!r}")
    abort(400, f"Invalid {field}: expected true or false")


def parse_metadata(data) -> dict:
    """
    Collect the descriptive fields of a registration request.

    Missing string fields default to empty strings; any present field must be
    a string. ``has_royalty`` is parsed with ``parse_bool``.

    Raises:
        HTTPException: 400 Bad Request if a field has the wrong type
    """
    metadata = {}
    for field in METADATA_FIELDS:
        value = data.get(field, "")
        if value is None:
            value = ""
        if not isinstance(value, str):
            logger.warning(f"Invalid type for {field}: {type(value).__name__}")
            abort(400, f"Invalid {field}: expected a string")
        metadata[field] = value
    metadata["has_royalty"] = parse_bool(data.get("has_royalty"), "has_royalty")
    return metadata


def decode_content(value) -> bytes | None:
    """
    Decode base64 content from a JSON registration body.

    Returns:
        Decoded bytes, or ``None`` when no content was sent

    Raises:
        HTTPException: 400 Bad Request if the value is not valid base64
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        abort(400, "Invalid content: expected a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Content is not valid base64")
        abort(400, "Invalid content: not valid base64")
