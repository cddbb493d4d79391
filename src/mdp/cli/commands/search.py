"""Tag search command.

Prints every date section matching a tag query, e.g.

    mdp search diary.md school AND roger
    mdp search diary.md school,roger --mode and --from 2022-11-01
"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from mdp.cli.app import app
from mdp.cli.commands.command_utils import fail, load_tree, write_output
from mdp.errors import MdpError
from mdp.formatting import format_search_results
from mdp.query import Operator, SectionOrdering, index, parse_query
from mdp.query import search as search_sections


@app.command()
def search(
    ctx: typer.Context,
    input_path: Annotated[Path, typer.Argument(help="The path to the markdown file")],
    query: Annotated[
        list[str],
        typer.Argument(help="Tags to look for, optionally joined by AND / OR"),
    ],
    mode: Annotated[
        Optional[Operator],
        typer.Option(
            "--mode",
            case_sensitive=False,
            help="How terms are combined when the query has no AND / OR",
        ),
    ] = None,
    ordering: Annotated[
        Optional[SectionOrdering],
        typer.Option("--order", case_sensitive=False, help="Ordering of search results"),
    ] = None,
    date_from: Annotated[
        Optional[datetime],
        typer.Option("--from", formats=["%Y-%m-%d"], help="Only consider sections from this date on"),
    ] = None,
    date_until: Annotated[
        Optional[datetime],
        typer.Option("--until", formats=["%Y-%m-%d"], help="Only consider sections up to this date"),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Also write the matched sections to a file"),
    ] = None,
):
    """Search date sections by tag."""
    config = ctx.obj
    try:
        expression = parse_query(query, default_mode=mode or config.search_mode)
        tree = load_tree(input_path)
        results = search_sections(
            tree,
            index(tree),
            expression,
            date_from=date_from.date() if date_from else None,
            date_until=date_until.date() if date_until else None,
            ordering=ordering or config.section_ordering,
        )
        if not results:
            logger.warning("No matching sections found")
            return

        output = format_search_results(results)
        typer.echo(output)
        if output_path is not None:
            write_output(output_path, output + "\n")
    except MdpError as e:
        raise fail("search", e)
