"""
Error types raised by the registry core.

Both kinds are caller-input errors. They are raised before any mutation, so a
failed registration never leaves partial state behind. The host boundary
decides how to surface them.
"""


class RegistryError(Exception):
    """Base class for registry failures."""


class DuplicateDigest(RegistryError):
    """Raised when a digest that is already registered is submitted again."""

    def __init__(self, digest: str):
        self.digest = digest
        super().__init__(f"Digest already registered: {digest}")


class ContentTooLarge(RegistryError):
    """Raised when the supplied content exceeds the registry's size ceiling."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Content is {size} bytes, limit is {limit} bytes")
