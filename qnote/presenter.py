"""
presenter.py

Pure formatting helpers for terminal output. Nothing here touches the store
or prints; the CLI decides where the strings go.
"""

from typing import Optional

from qnote.types import DONE_MARKER, Note

DISPLAY_WIDTH = 50
ELLIPSIS = "..."

# ANSI SGR 9 (crossed-out) and reset.
STRIKE_START = "\x1b[9m"
STRIKE_END = "\x1b[0m"

EMPTY_STORE_MESSAGE = (
    "No notes were found.\n"
    "Try with the -h option for more information."
)


def truncate(text: str) -> str:
    """
    Shorten `text` for the listing.

    Text of DISPLAY_WIDTH characters or more is cut so that, with the
    ellipsis appended, exactly DISPLAY_WIDTH characters remain.
    """
    if len(text) >= DISPLAY_WIDTH:
        return text[: DISPLAY_WIDTH - len(ELLIPSIS)] + ELLIPSIS
    return text


def render_line(note: Note) -> str:
    """Render one listing line; completed notes are struck through."""
    line = f"{note['id']} {truncate(note['text'])}"
    if note["done"] == DONE_MARKER:
        return f"{STRIKE_START}{line}{STRIKE_END}"
    return line


def render_summary(count: int) -> Optional[str]:
    """Return the empty-store message when `count` is 0, otherwise None."""
    if count == 0:
        return EMPTY_STORE_MESSAGE
    return None


def render_usage(program_name: str) -> str:
    return "\n".join(
        [
            f"Usage: {program_name} [OPTION]... [ARGUMENT]...",
            "Simple note taking",
            "",
            "Options:",
            "  -a     add a new note",
            "  -d id  delete note (specified by id)",
            "  -e id  edit note (specified by id)",
            "  -h     print this message",
            "  -l     list all notes",
            "  -m id  mark note (specified by id) as completed",
            "  -v id  view note (specified by id)",
            "  --verbose  show where the notes are stored and what is done",
            "",
            "If no options are provided, the notes will be listed.",
        ]
    )
