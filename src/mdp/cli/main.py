"""Main CLI entry point for mdp."""  # pragma: no cover

from mdp.cli.app import app  # pragma: no cover

# Register commands
from mdp.cli.commands import (  # noqa: F401  # pragma: no cover
    search,
    tags,
    tasks,
    tree,
)

if __name__ == "__main__":  # pragma: no cover
    app()
