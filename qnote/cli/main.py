"""
Command-line entrypoint for qnote.

The command surface is letter based, in the style of a classic getopt tool:

    qnote              list all notes
    qnote -a           add a note (read one line from stdin)
    qnote -l           list all notes
    qnote -h           show usage
    qnote -d <id>      delete a note
    qnote -e <id>      replace the text of a note
    qnote -m <id>      mark a note as completed
    qnote -v <id>      view the full text of a note

The leading dash is optional (`qnote a` works too) and letters are case
insensitive. Typer is configured to hand unknown options through as plain
arguments so this module can dispatch on them itself.

This module is the only place that turns store errors into messages and
exit codes. Everything below it raises.
"""

import sys
from typing import List, Optional

import click
import typer
from dotenv import load_dotenv
from typer.core import TyperCommand

from qnote.logging_utils import log_error, log_verbose, log_warning
from qnote.paths import resolve_path
from qnote.presenter import render_line, render_summary, render_usage
from qnote.store import NoteNotFoundError, NoteStore, StoreError

# Load environment variables (e.g. XDG_DATA_DIR) from a local .env file
load_dotenv()

DEFAULT_PROGRAM_NAME = "qnote"
INPUT_PROMPT = "(hit ENTER to finish):"

# Largest value SQLite can store in an INTEGER column.
MAX_NOTE_ID = 2**63 - 1

# Command letters that take no argument and those that require a note id.
PLAIN_COMMANDS = ("a", "l", "h")
ID_COMMANDS = ("d", "e", "m", "v")


# ---------------------------------------------------------------------------
# Application definition
# ---------------------------------------------------------------------------
# `help_option_names` is emptied so `-h` reaches the dispatcher as a regular
# argument, and `ignore_unknown_options` lets `-a`, `-d 3`, ... through.
# ---------------------------------------------------------------------------
COMMAND_CONTEXT = {
    "ignore_unknown_options": True,
    "help_option_names": [],
}


class NotesCommand(TyperCommand):
    """
    Command class that reports malformed invocations the same way as an
    unknown command letter: usage text and exit status 1.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            log_error(e.format_message())
            typer.echo(render_usage(ctx.find_root().info_name or DEFAULT_PROGRAM_NAME))
            raise typer.Exit(code=1)


notes_app = typer.Typer(add_completion=False)


def parse_note_id(raw: str) -> int:
    """
    Parse a note id given on the command line.

    Raises
    ------
    ValueError
        If `raw` is not a positive integer.
    """
    try:
        note_id = int(raw)
    except ValueError:
        raise ValueError(f"Invalid note id: {raw!r}") from None

    if note_id <= 0 or note_id > MAX_NOTE_ID:
        raise ValueError(f"Invalid note id: {raw!r}")
    return note_id


def read_note_text() -> str:
    """
    Prompt for and read a single line of note text from stdin.

    Raises
    ------
    ValueError
        On end of input or an empty line.
    """
    typer.echo(INPUT_PROMPT)
    line = sys.stdin.readline()
    if not line:
        raise ValueError("No note text given.")

    text = line.rstrip("\r\n")
    if not text:
        raise ValueError("Note text must not be empty.")
    return text


# ---------------------------------------------------------------------------
# Command implementations
# ---------------------------------------------------------------------------


def list_notes(store: NoteStore) -> None:
    summary = render_summary(store.count())
    if summary is not None:
        typer.echo(summary)
        return

    listing = store.scan()
    for note in listing["notes"]:
        typer.echo(render_line(note), color=True)

    if listing["skipped"]:
        log_warning(f"Skipped {listing['skipped']} unreadable note(s).")


def add_note(store: NoteStore) -> None:
    note_id = store.insert(read_note_text())
    typer.echo(f"Note {note_id} added.")


def require_note(store: NoteStore, note_id: int) -> None:
    if not store.exists(note_id):
        raise NoteNotFoundError(note_id)


def delete_note(store: NoteStore, note_id: int) -> None:
    require_note(store, note_id)
    store.delete(note_id)
    typer.echo(f"Note {note_id} deleted.")


def edit_note(store: NoteStore, note_id: int) -> None:
    require_note(store, note_id)
    store.update_text(note_id, read_note_text())
    typer.echo(f"Note {note_id} updated.")


def mark_note(store: NoteStore, note_id: int) -> None:
    require_note(store, note_id)
    store.set_done(note_id)
    typer.echo(f"Note {note_id} marked as completed.")


def view_note(store: NoteStore, note_id: int) -> None:
    require_note(store, note_id)
    note = store.get(note_id)
    if note is None:
        raise StoreError(f"Note {note_id} could not be read.")
    typer.echo(note["text"])


ID_HANDLERS = {
    "d": delete_note,
    "e": edit_note,
    "m": mark_note,
    "v": view_note,
}


def dispatch(store: NoteStore, args: List[str], program_name: str, verbose: bool) -> None:
    """
    Map the raw argument list onto a store operation.

    Raises StoreError or ValueError; exits with status 1 after printing
    usage for anything it does not recognise.
    """
    if not args:
        list_notes(store)
        return

    cmd = args[0].replace("-", "").lower()

    if cmd in PLAIN_COMMANDS and len(args) == 1:
        if cmd == "h":
            typer.echo(render_usage(program_name))
        elif cmd == "a":
            log_verbose("Adding a note.", verbose)
            add_note(store)
        else:
            list_notes(store)
        return

    if cmd in ID_COMMANDS and len(args) == 1:
        raise ValueError(f"Option -{cmd} requires a note id.")

    if cmd in ID_COMMANDS and len(args) == 2:
        note_id = parse_note_id(args[1])
        log_verbose(f"Running -{cmd} on note {note_id}.", verbose)
        ID_HANDLERS[cmd](store, note_id)
        return

    typer.echo(render_usage(program_name))
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Command: qnote [OPTION] [ID]
# ---------------------------------------------------------------------------
@notes_app.command(cls=NotesCommand, context_settings=COMMAND_CONTEXT)
def main(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="[OPTION] [ID]",
        help="Command letter (-a, -d, -e, -h, -l, -m, -v) and, where needed, a note id.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show where the notes are stored and what is being done.",
    ),
) -> None:
    """Simple note taking."""
    program_name = ctx.find_root().info_name or DEFAULT_PROGRAM_NAME

    db_path = resolve_path()
    log_verbose(f"Using note store at {db_path}", verbose)
    store = NoteStore(db_path)

    try:
        dispatch(store, list(args or []), program_name, verbose)
    except (StoreError, ValueError) as e:
        log_error(str(e))
        raise typer.Exit(code=1)


def run() -> None:
    """Console-script entrypoint declared in pyproject.toml."""
    notes_app()


# ---------------------------------------------------------------------------
# Entry point for `python -m qnote.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run()
