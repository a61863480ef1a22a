"""
Proof-of-existence registry.

Clients register a content digest (a hash computed from a file) together with
descriptive metadata and, optionally, the file itself. The registry records
who registered the digest and when, and guarantees that each digest is
registered at most once.

Features:
    - Insert-only store: entries are never updated or removed
    - 2 MiB ceiling on stored file content
    - Full, metadata-only and bulk read views (bulk never returns content)
    - Caller principal taken from a request header, anonymous by default
    - Monotonic nanosecond registration timestamps
    - Optional JSON snapshot for durability across restarts
    - Configurable via environment variables

Endpoints:
    - GET  /health
    - POST /register
    - GET  /files
    - GET  /files/<digest>
    - GET  /files/<digest>/metadata
    - GET  /files/<digest>/content
    - POST /verify
"""

__version__ = "0.1.0"

# Import key components for convenience
from .config import Config
from .errors import RegistryError, DuplicateDigest, ContentTooLarge
from .host import CallContext, MonotonicClock
from .models import Entry
from .registry import MAX_CONTENT_SIZE, register, get_full, get_metadata, enumerate_all
from .store import RegistryStore, get_store

__all__ = [
    "Config",
    "RegistryError",
    "DuplicateDigest",
    "ContentTooLarge",
    "CallContext",
    "MonotonicClock",
    "Entry",
    "MAX_CONTENT_SIZE",
    "register",
    "get_full",
    "get_metadata",
    "enumerate_all",
    "RegistryStore",
    "get_store",
]
