"""
NoteStore: identifier-based CRUD over the SQLite `notes` table.

The store is intentionally thin. It does not check whether a note exists
before updating or deleting it; at the SQL level those are no-ops for an
unknown id. Callers that want a "not found" signal call exists() first
and raise NoteNotFoundError themselves.

Each public method opens its own connection through open_store(), so the
table is (re)created if needed and the connection is released before the
method returns.
"""

import sqlite3
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from qnote.types import DONE_MARKER, Note, NoteListing

from .errors import StoreConnectionError, WriteError
from .schema import ensure_schema, open_store

SELECT_NOTES = "SELECT id, text, done FROM notes"


def strip_line_terminator(text: str) -> str:
    """Remove a single trailing "\\n" or "\\r\\n" from `text`."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def row_to_note(row: Sequence[Any]) -> Note:
    """
    Convert a `(id, text, done)` row into a Note.

    Raises
    ------
    ValueError
        If any column holds a value a Note cannot carry, e.g. a NULL or
        binary text, or a completion value other than DONE_MARKER.
    """
    note_id, text, done = row

    if not isinstance(note_id, int):
        raise ValueError(f"invalid note id: {note_id!r}")
    if not isinstance(text, str):
        raise ValueError(f"invalid text for note {note_id}: {text!r}")
    if done is not None and done != DONE_MARKER:
        raise ValueError(f"invalid done value for note {note_id}: {done!r}")

    return Note(id=note_id, text=text, done=done)


class NoteStore:
    """
    CRUD engine for notes persisted in a single SQLite file.

    The database path is injected; the store never looks at the process
    environment. Use qnote.paths.resolve_path() to obtain the default one.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _read(self, sql: str, params: Tuple[Any, ...] = ()) -> List[Tuple[Any, ...]]:
        with open_store(self.db_path) as conn:
            try:
                return conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                raise StoreConnectionError(f"Can't read notes: {e}") from e

    def _write(self, sql: str, params: Tuple[Any, ...]) -> Optional[int]:
        with open_store(self.db_path) as conn:
            try:
                cursor = conn.execute(sql, params)
                conn.commit()
            except sqlite3.Error as e:
                raise WriteError(f"Can't write note: {e}") from e
            return cursor.lastrowid

    # -----------------------------------------------------------------------
    # Schema
    # -----------------------------------------------------------------------

    def ensure_schema(self) -> None:
        ensure_schema(self.db_path)

    # -----------------------------------------------------------------------
    # Reads
    # -----------------------------------------------------------------------

    def count(self) -> int:
        """Return the number of rows in the store."""
        rows = self._read("SELECT count(*) FROM notes;")
        return int(rows[0][0])

    def exists(self, note_id: int) -> bool:
        rows = self._read("SELECT count(*) FROM notes WHERE id = ?;", (note_id,))
        return rows[0][0] > 0

    def scan(self) -> NoteListing:
        """
        Return every readable note in id order, plus how many rows were
        skipped because they could not be turned into a Note.
        """
        notes: List[Note] = []
        skipped = 0

        for row in self._read(SELECT_NOTES + " ORDER BY id;"):
            try:
                notes.append(row_to_note(row))
            except ValueError:
                skipped += 1

        return NoteListing(notes=notes, skipped=skipped)

    def list_all(self) -> List[Note]:
        """Return every readable note in insertion (id) order."""
        return self.scan()["notes"]

    def get(self, note_id: int) -> Optional[Note]:
        """Return the note with `note_id`, or None if absent or unreadable."""
        rows = self._read(SELECT_NOTES + " WHERE id = ?;", (note_id,))
        if not rows:
            return None

        try:
            return row_to_note(rows[0])
        except ValueError:
            return None

    # -----------------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------------

    def insert(self, text: str) -> int:
        """
        Add a new note and return the id SQLite assigned to it.

        One trailing line terminator is stripped from `text`; `done` is
        left unset.
        """
        note_id = self._write(
            "INSERT INTO notes(text) VALUES(?);", (strip_line_terminator(text),)
        )
        if note_id is None:
            raise WriteError("Insert did not return a note id")
        return note_id

    def update_text(self, note_id: int, text: str) -> None:
        """Replace the text of a note; `done` is left as it was."""
        self._write(
            "UPDATE notes SET text = ? WHERE id = ?;",
            (strip_line_terminator(text), note_id),
        )

    def set_done(self, note_id: int) -> None:
        """Mark a note as completed."""
        self._write("UPDATE notes SET done = ? WHERE id = ?;", (DONE_MARKER, note_id))

    def delete(self, note_id: int) -> None:
        """Remove a note permanently. Its id is never handed out again."""
        self._write("DELETE FROM notes WHERE id = ?;", (note_id,))
