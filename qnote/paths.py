"""
paths.py

Resolves where the note store lives on disk.

The location is built from two environment variables:

    ${HOME}/${XDG_DATA_DIR:-.config}/notes.db

Only the CLI calls this; NoteStore receives the resolved path in its
constructor so tests can point it at a temporary file.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

HOME_ENV = "HOME"
DATA_DIR_ENV = "XDG_DATA_DIR"
DEFAULT_DATA_DIR = ".config"
NOTES_DB = "notes.db"


def resolve_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Build the note store path from the environment.

    A missing HOME is not an error: it becomes an empty string, so the path
    starts at the filesystem root. Nothing is checked or created here.

    Parameters
    ----------
    environ : Mapping[str, str] | None
        Environment to read. Defaults to os.environ.
    """
    if environ is None:
        environ = os.environ

    home_dir = environ.get(HOME_ENV, "")
    data_dir = environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR)

    return Path(os.sep.join([home_dir, data_dir, NOTES_DB]))
