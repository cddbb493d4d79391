"""
Query evaluator for tag searches.

Evaluates a BooleanExpr against a TagIndex.
"""

from mdp.errors import InvalidQueryError
from mdp.query.ast import And, BooleanExpr, Or, Term
from mdp.query.tag_index import TagIndex


class QueryEvaluator:
    """Evaluates tag expressions to sets of date sections."""

    def __init__(self, index: TagIndex):
        self.index = index

    def evaluate(self, expression: BooleanExpr) -> list[int]:
        """
        Evaluate an expression.

        Args:
            expression: AST expression node

        Returns:
            Matching section references (indexes into Tree.sections), in
            document order, without duplicates
        """
        return sorted(self._sections(expression))

    def _sections(self, expression: BooleanExpr) -> set[int]:
        if isinstance(expression, Term):
            return set(self.index.sections_for(expression.tag_name))

        elif isinstance(expression, And):
            return self._sections(expression.left) & self._sections(expression.right)

        elif isinstance(expression, Or):
            return self._sections(expression.left) | self._sections(expression.right)

        else:
            raise InvalidQueryError(f"Unknown expression type: {type(expression).__name__}")


def evaluate(expression: BooleanExpr, index: TagIndex) -> list[int]:
    """Return the sections matching an expression."""
    return QueryEvaluator(index).evaluate(expression)
