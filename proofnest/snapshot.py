"""
Snapshot persistence for the proof registry.

Writes the whole registry to a single JSON file so entries survive a restart.
The file is replaced atomically: data goes to a temporary file in the same
directory which is then renamed over the target.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from .errors import ContentTooLarge
from .models import MAX_CONTENT_SIZE, Entry

logger = logging.getLogger(__name__)


def load_snapshot(path: str | Path) -> dict[str, Entry]:
    """
    Load registry entries from a snapshot file.

    Args:
        path: Snapshot file written by ``save_snapshot``

    Returns:
        Mapping of digest to Entry, in the order they were saved.
        Empty if the file does not exist yet.

    Raises:
        ContentTooLarge: an entry's content exceeds MAX_CONTENT_SIZE
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No snapshot at {path}, starting with an empty registry")
        return {}

    with open(path) as f:
        data = json.load(f)

    entries = {}
    for item in data.get("entries", []):
        entry = Entry.from_dict(item)
        if entry.content is not None and len(entry.content) > MAX_CONTENT_SIZE:
            logger.error(f"Snapshot entry '{entry.digest}' exceeds the content limit: {len(entry.content)} bytes")
            raise ContentTooLarge(len(entry.content), MAX_CONTENT_SIZE)
        entries[entry.digest] = entry

    logger.info(f"Loaded {len(entries)} entries from snapshot {path}")
    return entries


def save_snapshot(path: str | Path, entries: dict[str, Entry]) -> None:
    """
    Write all registry entries to a snapshot file.

    Args:
        path: Destination file; parent directories are created if missing
        entries: Mapping of digest to Entry
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {"entries": [entry.to_dict() for entry in entries.values()]}

    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=".snapshot-")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(payload, f)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise

    logger.debug(f"Snapshot written: {path} ({len(entries)} entries)")
