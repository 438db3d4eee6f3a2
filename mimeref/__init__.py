"""MIME type lookup by file path or type string, backed by mime-db."""
from mimeref.db import MimeDatabase, compile_db, get_base_db, insert_entry
from mimeref.entry import MimeEntry
from mimeref.resolver import ConfigError, Resolver, apply_predicate, get_type_part

__all__ = [
    "ConfigError",
    "MimeDatabase",
    "MimeEntry",
    "Resolver",
    "apply_predicate",
    "compile_db",
    "get_base_db",
    "get_type_part",
    "insert_entry",
]
