"""
Schema initialization and connection handling for the note store.

Every store operation goes through open_store(), which:

    • creates the parent directory of the database file if it is missing
    • opens a fresh SQLite connection
    • runs CREATE TABLE IF NOT EXISTS before handing the connection out
    • closes the connection on every exit path, including errors

Re-running the CREATE statement on each connection keeps the store usable
even if the database file was removed between two invocations.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from .errors import SchemaError, StoreConnectionError

CREATE_NOTES_TABLE = (
    "CREATE TABLE IF NOT EXISTS notes("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, text TEXT, done INT);"
)


def _connect(db_path: Path) -> sqlite3.Connection:
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreConnectionError(f"Can't create directory {db_path.parent}: {e}") from e

    try:
        return sqlite3.connect(str(db_path))
    except sqlite3.Error as e:
        raise StoreConnectionError(f"Can't open database {db_path}: {e}") from e


def create_table(conn: sqlite3.Connection) -> None:
    """Create the notes table on an open connection if it does not exist."""
    try:
        conn.execute(CREATE_NOTES_TABLE)
    except sqlite3.Error as e:
        raise SchemaError(f"Can't create notes table: {e}") from e


@contextmanager
def open_store(db_path: Path) -> Iterator[sqlite3.Connection]:
    """
    Yield a connection to an initialized store and always close it.

    Nothing is committed here; writers commit their own statements so a
    failed commit is reported as a write failure.
    """
    conn = _connect(Path(db_path))
    try:
        create_table(conn)
        yield conn
    finally:
        conn.close()


def ensure_schema(db_path: Union[str, Path]) -> None:
    """
    Make sure the notes table exists in the store at `db_path`.

    Idempotent: existing rows are never touched.

    Raises
    ------
    StoreConnectionError
        If the database file cannot be opened.
    SchemaError
        If the CREATE TABLE statement fails (e.g. the file is not a database).
    """
    with open_store(Path(db_path)):
        pass
