"""In-memory MIME database: type and extension indexes, shared base singleton."""
from __future__ import annotations

import json
import logging
import threading
from importlib import resources
from typing import Any, Mapping

from mimeref.entry import MimeEntry

logger = logging.getLogger("mimeref.db")

DATASET_FILE = "mime-db.json"


class MimeDatabase:
    """
    Two indexes over the same MimeEntry objects.

    by_type keys keep the case given at insert time; by_extension keys are
    lowercase extensions without the dot. max_ext_length only ever grows.
    """

    def __init__(self) -> None:
        self.by_type: dict[str, MimeEntry] = {}
        self.by_extension: dict[str, MimeEntry] = {}
        self.max_ext_length = 0
        self.lock = threading.RLock()

    def copy(self) -> "MimeDatabase":
        """New index dicts holding the same entries, with a lock of its own."""
        with self.lock:
            clone = MimeDatabase()
            clone.by_type = dict(self.by_type)
            clone.by_extension = dict(self.by_extension)
            clone.max_ext_length = self.max_ext_length
        return clone

    def __len__(self) -> int:
        return len(self.by_type)


def insert_entry(mime_type: str, entry: MimeEntry, db: MimeDatabase) -> None:
    """Index entry under mime_type and each of its extensions. Last insert wins."""
    with db.lock:
        db.by_type[mime_type] = entry
        for ext in entry.extensions:
            db.by_extension[ext] = entry
            if len(ext) > db.max_ext_length:
                db.max_ext_length = len(ext)


def compile_db(dataset: Mapping[str, Mapping[str, Any]]) -> MimeDatabase:
    """Build a database with one entry per dataset key, in dataset order."""
    db = MimeDatabase()
    for mime_type, record in dataset.items():
        insert_entry(mime_type, MimeEntry.from_record(mime_type, record), db)
    return db


def load_dataset() -> dict[str, dict[str, Any]]:
    """Read the bundled mime-db table as plain JSON data."""
    raw = resources.files("mimeref").joinpath("data").joinpath(DATASET_FILE).read_text(encoding="utf-8")
    return json.loads(raw)


# Module-level singleton — compiled once per process, shared by every
# resolver without overrides. Never modified by override construction.
_base_lock = threading.Lock()
_base: MimeDatabase | None = None


def get_base_db() -> MimeDatabase:
    global _base
    if _base is None:
        with _base_lock:
            if _base is None:
                db = compile_db(load_dataset())
                logger.debug(
                    "compiled base database: %d types, %d extensions, max_ext_length=%d",
                    len(db.by_type), len(db.by_extension), db.max_ext_length,
                )
                _base = db
    return _base
