"""
Public API for the note store.

Callers import from here:

    from qnote.store import NoteStore, StoreError

without depending on how the store is split into modules.
"""

from .errors import (
    NoteNotFoundError,
    SchemaError,
    StoreConnectionError,
    StoreError,
    WriteError,
)
from .note_store import DONE_MARKER, NoteStore
from .schema import ensure_schema

__all__ = [
    "DONE_MARKER",
    "NoteNotFoundError",
    "NoteStore",
    "SchemaError",
    "StoreConnectionError",
    "StoreError",
    "WriteError",
    "ensure_schema",
]
