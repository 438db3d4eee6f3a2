"""Unit tests for mimeref.db."""
import pytest
import mimeref.db as db_module
from mimeref.db import MimeDatabase, compile_db, get_base_db, insert_entry, load_dataset
from mimeref.entry import MimeEntry


SMALL_DATASET = {
    "audio/wav": {"compressible": False, "extensions": ["wav"]},
    "audio/x-wav": {"source": "apache", "extensions": ["wav"]},
    "application/x-long": {"extensions": ["a", "longest"]},
    "text/plain": {"source": "iana", "extensions": ["txt"]},
    "application/x-noext": {"source": "iana"},
}


class TestInsertEntry:
    def test_indexes_type_and_extensions(self):
        db = MimeDatabase()
        entry = MimeEntry("text/plain", extensions=["txt", "text"])
        insert_entry("text/plain", entry, db)
        assert db.by_type["text/plain"] is entry
        assert db.by_extension["txt"] is entry
        assert db.by_extension["text"] is entry
        assert db.max_ext_length == 4

    def test_last_insert_wins_for_type(self):
        db = MimeDatabase()
        first = MimeEntry("a/b")
        second = MimeEntry("a/b", charset="UTF-8")
        insert_entry("a/b", first, db)
        insert_entry("a/b", second, db)
        assert db.by_type["a/b"] is second

    def test_last_insert_wins_for_extension(self):
        db = MimeDatabase()
        insert_entry("a/b", MimeEntry("a/b", extensions=["x"]), db)
        later = MimeEntry("a/c", extensions=["x"])
        insert_entry("a/c", later, db)
        assert db.by_extension["x"] is later

    def test_max_ext_length_never_decreases(self):
        db = MimeDatabase()
        insert_entry("a/b", MimeEntry("a/b", extensions=["abcdef"]), db)
        insert_entry("a/b", MimeEntry("a/b", extensions=["ab"]), db)
        assert db.max_ext_length == 6

    def test_no_extensions_leaves_extension_index_alone(self):
        db = MimeDatabase()
        insert_entry("a/b", MimeEntry("a/b"), db)
        assert db.by_extension == {}
        assert db.max_ext_length == 0


class TestCompileDb:
    def test_one_entry_per_key(self):
        db = compile_db(SMALL_DATASET)
        assert set(db.by_type) == set(SMALL_DATASET)
        assert len(db) == len(SMALL_DATASET)

    def test_dataset_order_decides_shared_extension(self):
        db = compile_db(SMALL_DATASET)
        assert db.by_extension["wav"].type == "audio/x-wav"

    def test_max_ext_length(self):
        db = compile_db(SMALL_DATASET)
        assert db.max_ext_length == len("longest")

    def test_entries_defaulted(self):
        db = compile_db(SMALL_DATASET)
        assert db.by_type["text/plain"].compressible is True
        assert db.by_type["audio/wav"].source == "mime-db"
        assert db.by_type["application/x-noext"].extensions == []

    def test_empty_dataset(self):
        db = compile_db({})
        assert db.by_type == {}
        assert db.by_extension == {}
        assert db.max_ext_length == 0


class TestCopy:
    def test_copy_has_new_dicts_same_entries(self):
        db = compile_db(SMALL_DATASET)
        clone = db.copy()
        assert clone.by_type is not db.by_type
        assert clone.by_extension is not db.by_extension
        assert clone.by_type["text/plain"] is db.by_type["text/plain"]
        assert clone.max_ext_length == db.max_ext_length
        assert clone.lock is not db.lock

    def test_insert_into_copy_does_not_touch_original(self):
        db = compile_db(SMALL_DATASET)
        clone = db.copy()
        insert_entry("x/new", MimeEntry("x/new", extensions=["muchlongerext"]), clone)
        assert "x/new" not in db.by_type
        assert "muchlongerext" not in db.by_extension
        assert db.max_ext_length == len("longest")


class TestBundledDataset:
    def test_dataset_is_plain_data(self):
        data = load_dataset()
        assert isinstance(data, dict)
        assert data["application/pdf"]["extensions"] == ["pdf"]

    def test_base_db_compiled_once(self):
        assert get_base_db() is get_base_db()

    def test_base_db_rebuilt_after_reset(self, monkeypatch):
        monkeypatch.setattr(db_module, "_base", None)
        base = get_base_db()
        assert len(base) == len(load_dataset())
        longest = max(
            len(ext) for record in load_dataset().values() for ext in record.get("extensions", [])
        )
        assert base.max_ext_length == longest

    def test_every_dataset_type_has_boolean_compressible(self):
        base = compile_db(load_dataset())
        for mime_type, entry in base.by_type.items():
            assert entry.type == mime_type
            assert isinstance(entry.compressible, bool)
