# notes_db.py

"""
SQLite-backed persistence for notes and collections.
Defines table initialization and the thin CRUD helpers the views call:
notes with their hidden counterpart, named collections, and the
many-to-many note_collections association.
"""

from __future__ import annotations

import datetime
import sqlite3

from utils.config import settings
from utils.logger import logger
from utils.model_schemas import Collection, CollectionSummary, Note

# Shared connection, opened by init_db()
conn: sqlite3.Connection | None = None
_conn_path: str | None = None


class NotesDBError(Exception):
    """Base error for the notes store."""


class DuplicateCollectionError(NotesDBError):
    """Raised when a collection name is already taken (case-insensitive)."""


# Init
def init_db(db_path: str | None = None) -> None:
    """
    Open the database (settings.db_path by default) and create the notes,
    collections and note_collections tables if they don't exist.
    Safe to call on every rerun.
    """
    global conn, _conn_path

    path = db_path or settings.db_path
    if conn is not None and path != _conn_path:
        close_db()
    if conn is None:
        conn = sqlite3.connect(path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        _conn_path = path
        logger.info("Opened notes database at %s", path)

    conn.executescript(
        '''
        CREATE TABLE IF NOT EXISTS notes (
            id             INTEGER PRIMARY KEY AUTOINCREMENT,
            content        TEXT NOT NULL DEFAULT '',
            hidden_content TEXT NOT NULL DEFAULT '',
            created_at     TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS collections (
            id         INTEGER PRIMARY KEY AUTOINCREMENT,
            name       TEXT NOT NULL UNIQUE COLLATE NOCASE,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS note_collections (
            note_id       INTEGER NOT NULL REFERENCES notes(id) ON DELETE CASCADE,
            collection_id INTEGER NOT NULL REFERENCES collections(id) ON DELETE CASCADE,
            PRIMARY KEY (note_id, collection_id)
        );
        '''
    )
    conn.commit()


def close_db() -> None:
    global conn, _conn_path
    if conn is not None:
        conn.close()
    conn = None
    _conn_path = None


def _db() -> sqlite3.Connection:
    if conn is None:
        raise NotesDBError("Notes database is not initialized; call init_db() first.")
    return conn


def _now() -> str:
    return datetime.datetime.now().isoformat()


# Notes
def get_notes() -> list[Note]:
    """
    Retrieve all notes, newest first.
    """
    rows = _db().execute(
        "SELECT id, content, hidden_content FROM notes ORDER BY created_at DESC, id DESC"
    ).fetchall()
    return [Note(**dict(row)) for row in rows]


def get_note_by_id(note_id: int) -> Note | None:
    row = _db().execute(
        "SELECT id, content, hidden_content FROM notes WHERE id = ?", (note_id,)
    ).fetchone()
    return Note(**dict(row)) if row else None


def create_note(content: str, hidden_content: str = "") -> int:
    """
    Insert a new note and return its ID.
    """
    db = _db()
    cur = db.execute(
        "INSERT INTO notes (content, hidden_content, created_at) VALUES (?, ?, ?)",
        (content, hidden_content, _now())
    )
    db.commit()
    logger.info("Created note %s", cur.lastrowid)
    return cur.lastrowid


def update_note(note_id: int, content: str, hidden_content: str) -> None:
    """
    Overwrite both text fields of an existing note.
    """
    db = _db()
    db.execute(
        "UPDATE notes SET content = ?, hidden_content = ? WHERE id = ?",
        (content, hidden_content, note_id)
    )
    db.commit()


def delete_note(note_id: int) -> None:
    """
    Remove a note permanently, along with its collection memberships.
    """
    db = _db()
    db.execute("DELETE FROM notes WHERE id = ?", (note_id,))
    db.commit()
    logger.info("Deleted note %s", note_id)


# Collections
def get_collections() -> list[Collection]:
    """
    Retrieve all collections, newest first.
    """
    rows = _db().execute(
        "SELECT id, name FROM collections ORDER BY created_at DESC, id DESC"
    ).fetchall()
    return [Collection(**dict(row)) for row in rows]


def create_collection(name: str) -> int:
    """
    Create a collection and return its ID.
    Raises ValueError for a blank name and DuplicateCollectionError if taken.
    """
    name = (name or "").strip()
    if not name:
        raise ValueError("Collection name cannot be empty.")

    db = _db()
    try:
        cur = db.execute(
            "INSERT INTO collections (name, created_at) VALUES (?, ?)", (name, _now())
        )
    except sqlite3.IntegrityError as e:
        raise DuplicateCollectionError(f"A collection named '{name}' already exists.") from e
    db.commit()
    logger.info("Created collection '%s' (%s)", name, cur.lastrowid)
    return cur.lastrowid


def add_note_to_collection(note_id: int, collection_id: int) -> bool:
    """
    Link a note to a collection. Returns False if it was already linked.
    """
    db = _db()
    try:
        cur = db.execute(
            "INSERT OR IGNORE INTO note_collections (note_id, collection_id) VALUES (?, ?)",
            (note_id, collection_id)
        )
    except sqlite3.IntegrityError as e:
        # Foreign key violation: unknown note or collection
        raise NotesDBError(
            f"Cannot add note {note_id} to collection {collection_id}."
        ) from e
    db.commit()
    return cur.rowcount > 0


def get_notes_for_collection(collection_id: int) -> list[Note]:
    """
    Retrieve the notes in a collection, in the order they were added.
    """
    rows = _db().execute(
        """
        SELECT n.id, n.content, n.hidden_content
          FROM note_collections nc
          JOIN notes n ON n.id = nc.note_id
         WHERE nc.collection_id = ?
         ORDER BY nc.rowid
        """,
        (collection_id,)
    ).fetchall()
    return [Note(**dict(row)) for row in rows]


def get_collection_note_counts() -> list[CollectionSummary]:
    """
    Every collection with the number of notes it holds, newest first.
    """
    rows = _db().execute(
        """
        SELECT c.id, c.name, COUNT(nc.note_id) AS note_count
          FROM collections c
          LEFT JOIN note_collections nc ON nc.collection_id = c.id
         GROUP BY c.id
         ORDER BY c.created_at DESC, c.id DESC
        """
    ).fetchall()
    return [CollectionSummary(**dict(row)) for row in rows]
