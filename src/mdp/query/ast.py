"""
Abstract Syntax Tree (AST) definitions for tag search queries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from mdp.errors import InvalidQueryError


class Operator(str, Enum):
    """Boolean operator joining two search terms."""

    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class Term:
    """Matches sections mentioning a tag (name without '@')."""

    tag_name: str


@dataclass(frozen=True)
class And:
    """Sections matched by both operands."""

    left: "BooleanExpr"
    right: "BooleanExpr"


@dataclass(frozen=True)
class Or:
    """Sections matched by either operand."""

    left: "BooleanExpr"
    right: "BooleanExpr"


BooleanExpr = Union[Term, And, Or]


def build_expression(terms: list[str], operators: list[Operator]) -> BooleanExpr:
    """
    Fold a flat list of terms and operators into an expression tree.

    Grouping is strictly left to right with no operator precedence, so
    ``a OR b AND c`` becomes ``And(Or(a, b), c)``.

    Args:
        terms: Tag names, in query order
        operators: Operators between consecutive terms

    Returns:
        The expression tree

    Raises:
        InvalidQueryError: If there are no terms, or the operator count is
            not one less than the term count
    """
    if not terms:
        raise InvalidQueryError("A search query needs at least one term")
    if len(operators) != len(terms) - 1:
        raise InvalidQueryError(
            f"Expected {len(terms) - 1} operator(s) for {len(terms)} term(s), "
            f"got {len(operators)}",
            terms=list(terms),
        )

    expression: BooleanExpr = Term(terms[0])
    for operator, term in zip(operators, terms[1:]):
        if operator == Operator.AND:
            expression = And(expression, Term(term))
        else:
            expression = Or(expression, Term(term))
    return expression


def term_names(expression: BooleanExpr) -> list[str]:
    """Tag names referenced by an expression, left to right, deduplicated."""
    if isinstance(expression, Term):
        return [expression.tag_name]
    names = term_names(expression.left)
    for name in term_names(expression.right):
        if name not in names:
            names.append(name)
    return names
