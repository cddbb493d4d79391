"""CLI commands for mdp."""

from . import search, tags, tasks, tree

__all__ = [
    "search",
    "tags",
    "tasks",
    "tree",
]
