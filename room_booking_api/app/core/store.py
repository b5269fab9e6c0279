"""
JSON file document store.

Every collection (``users``, ``rooms``, ``bookings``, ``contacts``) is a
single JSON file holding an array of records.  Reads load the whole
file and writes replace it wholesale.  The module provides plain
``load``/``save`` functions, a ``collection`` context manager that
performs a locked read‑modify‑write, and ``init_store`` which prepares
the data directory on application start.

Access to a collection is serialised by a per‑collection lock held
for the whole read‑modify‑write, so concurrent requests cannot lose
each other's updates inside a single process.  Separate processes
sharing the same data directory are not coordinated.
"""

import json
import logging
import os
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from .config import settings
from .errors import StorageUnavailable


logger = logging.getLogger(__name__)

Record = Dict[str, Any]

COLLECTIONS = ("users", "rooms", "bookings", "contacts")

_locks: Dict[str, threading.RLock] = {name: threading.RLock() for name in COLLECTIONS}
_locks_guard = threading.Lock()


def get_data_dir() -> Path:
    """Compute the directory holding the collection files.

    If ``settings.data_dir`` is absolute it is used directly, otherwise
    it is resolved relative to the project root.
    """
    data_dir = settings.data_dir
    if os.path.isabs(data_dir):
        return Path(data_dir)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / data_dir).resolve()


def collection_path(name: str) -> Path:
    return get_data_dir() / f"{name}.json"


def _lock_for(name: str) -> threading.RLock:
    with _locks_guard:
        if name not in _locks:
            _locks[name] = threading.RLock()
        return _locks[name]


def load(name: str) -> List[Record]:
    """Read the full contents of a collection.

    Raises ``StorageUnavailable`` if the file is missing, unreadable,
    not valid JSON or does not contain a JSON array.
    """
    path = collection_path(name)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error("Collection %s not found at %s", name, path)
        raise StorageUnavailable(f"Collection {name} is unavailable")
    except (OSError, ValueError):
        logger.exception("Collection %s at %s could not be read", name, path)
        raise StorageUnavailable(f"Collection {name} is unavailable")
    if not isinstance(data, list):
        logger.error("Collection %s at %s is not a JSON array", name, path)
        raise StorageUnavailable(f"Collection {name} is unavailable")
    return data


def save(name: str, records: List[Record]) -> None:
    """Replace the entire contents of a collection."""
    path = collection_path(name)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError:
        logger.exception("Collection %s could not be written to %s", name, path)
        raise StorageUnavailable(f"Collection {name} is unavailable")


@contextmanager
def collection(name: str) -> Iterator[List[Record]]:
    """Context manager for a locked read‑modify‑write of a collection.

    Yields the loaded list of records.  Mutations made to the list are
    written back when the block exits normally; if the block raises,
    nothing is written.
    """
    with _lock_for(name):
        records = load(name)
        yield records
        save(name, records)


def read(name: str) -> List[Record]:
    """Load a collection while holding its lock."""
    with _lock_for(name):
        return load(name)


def next_id(records: List[Record]) -> int:
    """Return a new record id for ``records``.

    Ids are millisecond timestamps, bumped past the largest existing id
    so two records created within the same millisecond never collide.
    Call this while holding the collection lock.
    """
    candidate = int(time.time() * 1000)
    existing = [r["id"] for r in records if isinstance(r.get("id"), int)]
    if existing and candidate <= max(existing):
        candidate = max(existing) + 1
    return candidate


def init_store() -> None:
    """Prepare the data directory.

    Creates the directory if needed and, when
    ``settings.auto_create_collections`` is enabled, seeds every
    missing collection file with an empty array.  Existing files are
    never touched.
    """
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    for name in COLLECTIONS:
        path = collection_path(name)
        if path.exists():
            continue
        if settings.auto_create_collections:
            logger.info("Creating empty collection %s at %s", name, path)
            save(name, [])
        else:
            logger.warning("Collection %s is missing at %s", name, path)
