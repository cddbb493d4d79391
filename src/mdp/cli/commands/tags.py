"""Tag listing command."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console

from mdp.cli.app import app
from mdp.cli.commands.command_utils import fail, load_tree, write_output
from mdp.errors import MdpError
from mdp.formatting import format_tag_counts, tag_table
from mdp.query import TagOrdering, index

console = Console()


@app.command()
def tags(
    ctx: typer.Context,
    input_path: Annotated[Path, typer.Argument(help="The path to the markdown file")],
    ordering: Annotated[
        Optional[TagOrdering],
        typer.Option("--ordering", case_sensitive=False, help="Ordering of tags"),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Export the tag list to a file"),
    ] = None,
):
    """List all tags with their number of occurrences."""
    ordering = ordering or ctx.obj.tag_ordering
    try:
        rows = index(load_tree(input_path)).counts(ordering)
        if not rows:
            logger.warning("No tags found!")
            return

        console.print(tag_table(rows))
        if output_path is not None:
            write_output(output_path, format_tag_counts(rows))
    except MdpError as e:
        raise fail("tags", e)
