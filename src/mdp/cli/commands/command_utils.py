"""Shared helpers for CLI commands."""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from mdp.errors import DiaryReadError, MdpError
from mdp.markdown import Tree, build, lex

error_console = Console(stderr=True)


def read_diary(path: Path) -> str:
    """Read a diary file as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DiaryReadError(path, str(e)) from e


def load_tree(path: Path) -> Tree:
    """Read a diary file and build its token tree."""
    logger.info(f"Parsing {path}")
    return build(lex(read_diary(path)))


def write_output(path: Path, text: str) -> None:
    """Write command output to a file."""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise MdpError(f"An error occurred while writing the file {path}: {e}") from e
    logger.info(f"Wrote {path}")


def fail(command: str, error: MdpError) -> typer.Exit:
    """Report a command error and return the exit to raise."""
    logger.debug(f"Error during {command}: {error!r}")
    error_console.print(f"[red]Error: {escape(str(error))}[/red]")
    return typer.Exit(1)
