"""Resolver: path and type-string lookups over a MIME database."""
from __future__ import annotations

import copy
import logging
import os
from typing import Any, Mapping, Optional

from mimeref.db import MimeDatabase, get_base_db, insert_entry
from mimeref.entry import ENTRY_FIELDS, SOURCE_ADHOC, MimeEntry

logger = logging.getLogger("mimeref.resolver")

# A lookup returns a MimeEntry, an empty dict for unknown extensions,
# or whatever an override predicate chose to return.
Record = Any


class ConfigError(ValueError):
    """Invalid resolver configuration. Raised at construction only."""


def get_type_part(fulltype: str) -> str:
    """Drop media type parameters: 'text/html; charset=utf-8' -> 'text/html'."""
    split_at = fulltype.find(";")
    return fulltype if split_at == -1 else fulltype[:split_at]


def apply_defaults(base: MimeEntry, override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge an override record over an existing entry, field by field.
    Override values win; None or missing fields fall back to the entry.
    Lists are replaced wholesale, never merged.
    """
    merged: dict[str, Any] = {}
    for name in ENTRY_FIELDS:
        value = override.get(name)
        if value is None:
            value = getattr(base, name)
            if isinstance(value, list):
                value = list(value)
        merged[name] = value
    return merged


def apply_predicate(record: Record) -> Record:
    """Run the record's predicate on a deep copy, if it has one."""
    if isinstance(record, Mapping):
        predicate = record.get("predicate")
    else:
        predicate = getattr(record, "predicate", None)
    if predicate:
        # The predicate itself is shared, not copied
        return predicate(copy.deepcopy(record, {id(predicate): predicate}))
    return record


class Resolver:
    """
    Resolve file paths and MIME type strings to entries.

    Without overrides the resolver holds the process-wide base database by
    reference. Ad-hoc types cached by type() therefore become visible to
    every other override-free resolver in the process. With overrides the
    resolver works on a private copy and the base is left untouched.
    """

    def __init__(self, override: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        base = get_base_db()
        if override is None:
            self._db = base
            return

        if not isinstance(override, Mapping):
            raise ConfigError("overrides option must be a mapping")

        db = base.copy()
        for mime_type, record in override.items():
            if not isinstance(record, Mapping):
                raise ConfigError(f"override for {mime_type!r} must be a mapping")
            predicate = record.get("predicate")
            if predicate and not callable(predicate):
                raise ConfigError("predicate option must be callable")

            existing = db.by_type.get(mime_type)
            merged = apply_defaults(existing, record) if existing is not None else record
            insert_entry(mime_type, MimeEntry.from_record(mime_type, merged), db)
            logger.debug("override applied: %s (replaces=%s)", mime_type, existing is not None)

        self._db = db

    @property
    def db(self) -> MimeDatabase:
        return self._db

    def path(self, path: str) -> Record:
        """
        Look up by file extension (case-insensitive).
        Unknown or missing extensions give an empty dict, not an entry.
        """
        extension = os.path.splitext(path)[1][1:].lower()
        mime = self._db.by_extension.get(extension)
        if mime is None:
            mime = {}
        return apply_predicate(mime)

    def type(self, mime_type: str) -> Record:
        """
        Look up by type string, ignoring parameters.
        Falls back to a trimmed, lowercased key, then caches an ad-hoc entry.
        """
        mime_type = get_type_part(mime_type)

        mime = self._db.by_type.get(mime_type)
        if mime is None:
            mime_type = mime_type.strip().lower()
            mime = self._db.by_type.get(mime_type)

        if mime is None:
            with self._db.lock:
                mime = self._db.by_type.get(mime_type)
                if mime is None:
                    mime = MimeEntry(mime_type, source=SOURCE_ADHOC)
                    insert_entry(mime_type, mime, self._db)
                    logger.debug("cached ad-hoc type %r", mime_type)
                    return mime

        return apply_predicate(mime)
