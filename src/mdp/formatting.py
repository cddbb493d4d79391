"""
Formatting of token trees, tags, tasks and search results for display.
"""

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree as RichTree

from mdp.markdown.tokens import Heading, TaskMarker
from mdp.markdown.tree import Tree, TreeNode
from mdp.query.search import SearchResult

SECTION_SEPARATOR = "\n\n---\n\n"


def serialize_section(node: TreeNode) -> str:
    """
    Serialize a subtree back to markdown.

    Leaves that came from the same source line are joined with spaces; each
    heading and each line of content becomes its own block.

    Args:
        node: Root of the subtree, usually a date section

    Returns:
        Markdown string
    """
    blocks: list[str] = []
    _serialize_node(node, blocks)
    return "\n\n".join(blocks)


def _serialize_node(node: TreeNode, blocks: list[str]):
    blocks.append(node.display_text)

    run: list[TreeNode] = []
    for child in node.children:
        if isinstance(child.token, Heading):
            _flush_run(run, blocks)
            _serialize_node(child, blocks)
            continue
        if run and (child.line is None or child.line != run[-1].line):
            _flush_run(run, blocks)
        run.append(child)
    _flush_run(run, blocks)


def _flush_run(run: list[TreeNode], blocks: list[str]):
    if run:
        blocks.append(" ".join(node.display_text for node in run))
        run.clear()


def format_search_results(results: list[SearchResult]) -> str:
    """Serialize matched sections, separated by horizontal rules."""
    return SECTION_SEPARATOR.join(serialize_section(result.node) for result in results)


def format_task(task: TaskMarker) -> str:
    """Format a task as '<KIND>[ UNTIL <date>]: <description>'."""
    return task.to_markdown()


def format_tag_counts(rows: list[tuple[str, int]]) -> str:
    """Format tag counts as a fixed-width plain text table."""
    lines = [f"{'Tag':<20} {'Count':>10}"]
    lines.extend(f"{name:<20} {count:>10}" for name, count in rows)
    return "\n".join(lines) + "\n"


def tag_table(rows: list[tuple[str, int]], title: str = "Tags") -> Table:
    """Build a rich table of tag counts."""
    table = Table(title=title)
    table.add_column("Tag", style="cyan")
    table.add_column("Count", justify="right")
    for name, count in rows:
        table.add_row(escape(f"@{name}"), str(count))
    return table


def token_tree(tree: Tree, title: str, debug: bool = False) -> RichTree:
    """
    Build a rich tree visualizing a token tree.

    Args:
        tree: Token tree
        title: Label of the root, usually the file name
        debug: Label nodes with their debug representation instead of markdown

    Returns:
        rich.tree.Tree ready to print
    """
    root = RichTree(escape(title))
    for node in tree.children:
        _add_branch(root, node, debug)
    return root


def _add_branch(parent: RichTree, node: TreeNode, debug: bool):
    label = node.token.to_debug() if debug else node.display_text
    branch = parent.add(escape(label))
    for child in node.children:
        _add_branch(branch, child, debug)
