"""
Tag index, tag search and task extraction over diary token trees.
"""

from mdp.query.ast import And, BooleanExpr, Operator, Or, Term, build_expression
from mdp.query.evaluator import QueryEvaluator, evaluate
from mdp.query.parser import parse_query
from mdp.query.search import SearchResult, SectionOrdering, search
from mdp.query.tag_index import TagEntry, TagIndex, TagOccurrence, TagOrdering, index
from mdp.query.tasks import TaskExtractor, TaskFilter, TaskOrdering, extract_tasks

__all__ = [
    # AST
    "And",
    "BooleanExpr",
    "Operator",
    "Or",
    "Term",
    "build_expression",
    # Evaluator
    "QueryEvaluator",
    "evaluate",
    # Parser
    "parse_query",
    # Search
    "SearchResult",
    "SectionOrdering",
    "search",
    # Tag index
    "TagEntry",
    "TagIndex",
    "TagOccurrence",
    "TagOrdering",
    "index",
    # Tasks
    "TaskExtractor",
    "TaskFilter",
    "TaskOrdering",
    "extract_tasks",
]
