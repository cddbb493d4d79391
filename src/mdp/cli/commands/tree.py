"""Token tree command."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from mdp.cli.app import app
from mdp.cli.commands.command_utils import fail, load_tree
from mdp.errors import MdpError
from mdp.formatting import token_tree

console = Console()


@app.command("token-tree")
def token_tree_command(
    input_path: Annotated[Path, typer.Argument(help="The path to the markdown file")],
    debug: bool = typer.Option(False, "--debug", help="Print tokens using their debug representation"),
):
    """Show the tree of markdown tokens."""
    try:
        tree = load_tree(input_path)
    except MdpError as e:
        raise fail("token-tree", e)

    console.print(token_tree(tree, input_path.name, debug=debug))
