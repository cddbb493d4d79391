"""Task listing command."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdp.cli.app import app
from mdp.cli.commands.command_utils import fail, load_tree
from mdp.errors import MdpError
from mdp.formatting import format_task
from mdp.query import TaskExtractor, TaskFilter, TaskOrdering


@app.command()
def tasks(
    ctx: typer.Context,
    input_path: Annotated[Path, typer.Argument(help="The path to the markdown file")],
    task_filter: Annotated[
        Optional[TaskFilter],
        typer.Option("--show", case_sensitive=False, help="Only show tasks of the chosen kind"),
    ] = None,
    ordering: Annotated[
        Optional[TaskOrdering],
        typer.Option("--order", case_sensitive=False, help="Ordering of tasks"),
    ] = None,
):
    """Show tasks (TODO, TODO UNTIL <DATE>, DOING, REVIEW, DONE)."""
    config = ctx.obj
    try:
        found = TaskExtractor.extract_tasks(load_tree(input_path))
    except MdpError as e:
        raise fail("tasks", e)

    found = TaskExtractor.filter_tasks(found, task_filter or config.task_filter)
    found = TaskExtractor.order_tasks(found, ordering or config.task_ordering)
    for task in found:
        typer.echo(format_task(task))
