"""
qnote/types.py

Centralized type definitions for qnote.

Notes travel between the store, the presenter and the CLI as plain
TypedDicts. The store builds a fresh dict for every row it reads, so callers
never hold a live reference into the database; all mutation goes back
through NoteStore.
"""

from typing import List, Optional, TypedDict

# Value stored in `done` once a note is completed.
DONE_MARKER = 1


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------
# A single row of the `notes` table.
#
#   • id  : assigned by SQLite (AUTOINCREMENT), never reused
#   • text: the note body, trailing line terminator already stripped
#   • done: None while open, DONE_MARKER (1) once completed
# ---------------------------------------------------------------------------
class Note(TypedDict):
    id: int
    text: str
    done: Optional[int]


# ---------------------------------------------------------------------------
# NoteListing
# ---------------------------------------------------------------------------
# Returned by NoteStore.scan(). `skipped` counts rows that could not be
# turned into a Note (wrong column types, unknown completion value).
# ---------------------------------------------------------------------------
class NoteListing(TypedDict):
    notes: List[Note]
    skipped: int
