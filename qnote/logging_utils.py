"""
logging_utils.py

A small collection of output helpers used by the qnote CLI.

Everything goes through typer.echo so output stays consistent with the rest
of the command and is captured by Typer's CliRunner in tests. Regular
results go to stdout; warnings and errors go to stderr.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what is happening
        (e.g., "Using note store at ...").

    verbose : bool
        Whether verbose mode is active. When False, nothing is printed.
    """
    if verbose:
        typer.echo(message)


def log_warning(message: str) -> None:
    """Print a non-fatal warning to stderr."""
    typer.echo(f"Warning: {message}", err=True)


def log_error(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
