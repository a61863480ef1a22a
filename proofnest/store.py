"""
Registry store: the single authoritative map from digest to Entry.

The store is insert-only. There is no way to remove or replace an entry once
it is present.
"""

import logging
from threading import Lock

from .config import config
from .errors import DuplicateDigest
from .models import Entry
from .snapshot import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)


class RegistryStore:
    """
    Thread-safe, insert-only mapping of digest to Entry.

    All access to the underlying dict goes through one lock, so the
    duplicate check and the insertion in ``insert`` form a single atomic
    step with respect to other callers.

    Args:
        snapshot_path: Optional JSON file. When given, existing entries are
            loaded from it and the file is rewritten after every insertion.
            The rewrite happens while the lock is held, so reads wait for it.
    """

    def __init__(self, snapshot_path=None):
        self._lock = Lock()
        self._snapshot_path = snapshot_path or None
        self._entries: dict[str, Entry] = {}
        if self._snapshot_path:
            self._entries = load_snapshot(self._snapshot_path)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def contains(self, digest: str) -> bool:
        with self._lock:
            return digest in self._entries

    def insert(self, digest: str, entry: Entry) -> None:
        """
        Insert ``entry`` under ``digest`` if the digest is not present.

        Raises:
            DuplicateDigest: digest is already a key; nothing is changed
        """
        with self._lock:
            if digest in self._entries:
                raise DuplicateDigest(digest)
            self._entries[digest] = entry
            if self._snapshot_path:
                try:
                    save_snapshot(self._snapshot_path, self._entries)
                except BaseException:
                    # Entry must not be visible if it could not be persisted
                    del self._entries[digest]
                    raise

    def get(self, digest: str) -> Entry | None:
        with self._lock:
            return self._entries.get(digest)

    def enumerate(self) -> list[tuple[str, Entry]]:
        """Return a snapshot of all (digest, Entry) pairs in insertion order."""
        with self._lock:
            return list(self._entries.items())


_store: RegistryStore | None = None
_store_lock = Lock()


def get_store() -> RegistryStore:
    """
    Return the process-wide registry store, creating it on first use.

    The store is backed by ``config.SNAPSHOT_PATH`` when that is set.
    """
    global _store
    with _store_lock:
        if _store is None:
            logger.info(f"Initializing registry store (snapshot: {config.SNAPSHOT_PATH or 'disabled'})")
            _store = RegistryStore(config.SNAPSHOT_PATH)
        return _store


def set_store(store: RegistryStore | None) -> None:
    """Replace the process-wide store. ``None`` re-enables lazy creation."""
    global _store
    with _store_lock:
        _store = store
