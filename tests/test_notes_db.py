"""
Tests for the SQLite notes and collections store.
"""

import pytest

from utils import notes_db
from utils.notes_db import DuplicateCollectionError, NotesDBError


class TestNotes:

    def test_create_and_fetch(self, db):
        note_id = db.create_note("front", "back")
        note = db.get_note_by_id(note_id)
        assert note.id == note_id
        assert note.content == "front"
        assert note.hidden_content == "back"

    def test_hidden_content_defaults_to_empty(self, db):
        note = db.get_note_by_id(db.create_note("just content"))
        assert note.hidden_content == ""

    def test_newest_first(self, db):
        first = db.create_note("first")
        second = db.create_note("second")
        assert [n.id for n in db.get_notes()] == [second, first]

    def test_update_both_fields(self, db):
        note_id = db.create_note("old", "old hidden")
        db.update_note(note_id, "new", "new hidden")
        note = db.get_note_by_id(note_id)
        assert (note.content, note.hidden_content) == ("new", "new hidden")

    def test_delete(self, db):
        note_id = db.create_note("gone")
        db.delete_note(note_id)
        assert db.get_note_by_id(note_id) is None
        assert db.get_notes() == []

    def test_missing_note(self, db):
        assert db.get_note_by_id(999) is None


class TestCollections:

    def test_create_and_list_newest_first(self, db):
        a = db.create_collection("Spanish")
        b = db.create_collection("Python")
        assert [(c.id, c.name) for c in db.get_collections()] == [(b, "Python"), (a, "Spanish")]

    def test_name_is_trimmed(self, db):
        db.create_collection("  Trimmed  ")
        assert db.get_collections()[0].name == "Trimmed"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, db, name):
        with pytest.raises(ValueError):
            db.create_collection(name)

    def test_duplicate_name_rejected_case_insensitively(self, db):
        db.create_collection("Python")
        with pytest.raises(DuplicateCollectionError):
            db.create_collection("python")


class TestNoteCollections:

    def test_notes_in_insertion_order(self, db):
        col = db.create_collection("Deck")
        n1, n2, n3 = (db.create_note(f"note {i}") for i in range(3))
        for note_id in (n2, n3, n1):
            db.add_note_to_collection(note_id, col)
        assert [n.id for n in db.get_notes_for_collection(col)] == [n2, n3, n1]

    def test_many_to_many(self, db):
        a, b = db.create_collection("A"), db.create_collection("B")
        note_id = db.create_note("shared")
        assert db.add_note_to_collection(note_id, a) is True
        assert db.add_note_to_collection(note_id, b) is True
        assert [n.id for n in db.get_notes_for_collection(a)] == [note_id]
        assert [n.id for n in db.get_notes_for_collection(b)] == [note_id]

    def test_adding_twice_is_a_no_op(self, db):
        col = db.create_collection("Deck")
        note_id = db.create_note("once")
        assert db.add_note_to_collection(note_id, col) is True
        assert db.add_note_to_collection(note_id, col) is False
        assert len(db.get_notes_for_collection(col)) == 1

    def test_unknown_collection_rejected(self, db):
        note_id = db.create_note("orphan")
        with pytest.raises(NotesDBError):
            db.add_note_to_collection(note_id, 42)

    def test_deleted_note_leaves_collection(self, db):
        col = db.create_collection("Deck")
        keep, drop = db.create_note("keep"), db.create_note("drop")
        db.add_note_to_collection(keep, col)
        db.add_note_to_collection(drop, col)
        db.delete_note(drop)
        assert [n.id for n in db.get_notes_for_collection(col)] == [keep]

    def test_note_counts(self, db):
        full, empty = db.create_collection("Full"), db.create_collection("Empty")
        for i in range(2):
            db.add_note_to_collection(db.create_note(str(i)), full)
        counts = {s.id: s.note_count for s in db.get_collection_note_counts()}
        assert counts == {full: 2, empty: 0}


class TestLifecycle:

    def test_use_before_init_raises(self):
        notes_db.close_db()
        with pytest.raises(NotesDBError):
            notes_db.get_notes()

    def test_init_is_idempotent(self, db):
        note_id = db.create_note("survives")
        db.init_db(":memory:")
        assert db.get_note_by_id(note_id).content == "survives"

    def test_init_with_file_path(self, tmp_path):
        path = str(tmp_path / "notes.db")
        notes_db.init_db(path)
        try:
            note_id = notes_db.create_note("on disk")
        finally:
            notes_db.close_db()

        notes_db.init_db(path)
        try:
            assert notes_db.get_note_by_id(note_id).content == "on disk"
        finally:
            notes_db.close_db()
