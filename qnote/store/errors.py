"""
Error taxonomy for the note store.

Store operations raise StoreConnectionError, SchemaError or WriteError and
never catch their own errors. NoteNotFoundError is raised by the command
layer after an explicit exists() check; the store itself treats a missing id
as a no-op.
"""


class StoreError(RuntimeError):
    """Base class for every error raised by the note store."""


class StoreConnectionError(StoreError):
    """The store file could not be opened, created or read."""


class SchemaError(StoreError):
    """The notes table could not be created."""


class WriteError(StoreError):
    """An insert, update or delete statement failed."""


class NoteNotFoundError(StoreError):
    def __init__(self, note_id: int) -> None:
        super().__init__(f"Note {note_id} not found.")
        self.note_id = note_id
