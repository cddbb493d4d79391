"""
Tag search over the date sections of a diary.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from loguru import logger

from mdp.markdown.tree import Tree, TreeNode
from mdp.query.ast import BooleanExpr, term_names
from mdp.query.evaluator import evaluate
from mdp.query.tag_index import TagIndex


class SectionOrdering(str, Enum):
    """Ordering of search results."""

    DATE = "date"
    RELEVANCE = "relevance"


@dataclass
class SearchResult:
    """A date section matched by a search."""

    section: int
    node: TreeNode
    matched_tags: list[str] = field(default_factory=list)


def in_date_range(section_date: date | None, date_from: date | None, date_until: date | None) -> bool:
    """Check a section date against optional inclusive bounds."""
    if date_from is None and date_until is None:
        return True
    if section_date is None:
        return False
    if date_from is not None and section_date < date_from:
        return False
    if date_until is not None and section_date > date_until:
        return False
    return True


def search(
    tree: Tree,
    index: TagIndex,
    expression: BooleanExpr,
    date_from: date | None = None,
    date_until: date | None = None,
    ordering: SectionOrdering = SectionOrdering.DATE,
) -> list[SearchResult]:
    """
    Find the date sections matching a tag expression.

    Args:
        tree: Token tree the index was built from
        index: Tag index of the tree
        expression: Tag expression to evaluate
        date_from: Skip sections dated before this day
        date_until: Skip sections dated after this day
        ordering: DATE sorts by section date, then by number of matched
            tags; RELEVANCE sorts by number of matched tags, then by date.
            Undated sections come after dated ones, ties keep document order.

    Returns:
        List of SearchResult objects
    """
    names = term_names(expression)
    results = []

    for section in evaluate(expression, index):
        node = tree.sections[section]
        if not in_date_range(node.date, date_from, date_until):
            continue
        matched = [name for name in names if index.mentions(name, section)]
        results.append(SearchResult(section=section, node=node, matched_tags=matched))

    results.sort(key=_sort_key(ordering))

    logger.debug(f"Search matched {len(results)} sections")
    return results


def _date_key(result: SearchResult) -> tuple[bool, date]:
    section_date = result.node.date
    return section_date is None, section_date or date.min


def _sort_key(ordering: SectionOrdering):
    if ordering == SectionOrdering.RELEVANCE:
        return lambda result: (-len(result.matched_tags), _date_key(result))
    return lambda result: (_date_key(result), -len(result.matched_tags))
