"""
Shared pytest configuration for the qnote test suite.

Fixtures here keep every test on a private, temporary note store:

    • cli_runner  : a fresh Typer CliRunner
    • db_path     : path of a not-yet-created store under tmp_path
    • store       : a NoteStore bound to db_path
    • raw_sql     : run SQL directly against db_path, bypassing NoteStore
    • notes_env   : HOME / XDG_DATA_DIR pointed at tmp_path for CLI tests
"""

import sqlite3
from pathlib import Path

import pytest
from typer.testing import CliRunner

from qnote.store import NoteStore


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Location of a store that does not exist yet (nor does its directory)."""
    return tmp_path / "data" / "notes.db"


@pytest.fixture
def store(db_path) -> NoteStore:
    return NoteStore(db_path)


@pytest.fixture
def raw_sql(db_path):
    """
    Run a statement directly against the store file, bypassing NoteStore.

    Used to plant rows NoteStore would never write, and to inspect the table
    without going through the code under test.
    """

    def _run(sql: str, params: tuple = ()) -> list:
        conn = sqlite3.connect(str(db_path))
        try:
            rows = conn.execute(sql, params).fetchall()
            conn.commit()
            return rows
        finally:
            conn.close()

    return _run


# ============================================================================
# CLI ENVIRONMENT
# ============================================================================


@pytest.fixture
def notes_env(tmp_path, monkeypatch) -> Path:
    """
    Point the CLI at tmp_path/.qnote/notes.db and return that path.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_DATA_DIR", ".qnote")
    return tmp_path / ".qnote" / "notes.db"
