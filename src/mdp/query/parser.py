"""
Parser for tag search queries given on the command line.

Converts query words such as ``["school", "AND", "@roger"]`` or
``["school,roger"]`` into a BooleanExpr.
"""

from mdp.errors import InvalidQueryError
from mdp.query.ast import BooleanExpr, Operator, build_expression

OPERATORS = {
    "AND": Operator.AND,
    "OR": Operator.OR,
}


def split_words(words: list[str]) -> list[str]:
    """Split words on commas and whitespace, dropping empty pieces."""
    pieces = []
    for word in words:
        pieces.extend(word.replace(",", " ").split())
    return pieces


def parse_query(words: list[str], default_mode: Operator = Operator.OR) -> BooleanExpr:
    """
    Parse query words into an expression.

    Terms may carry a leading '@'. When the query names no operator at all,
    consecutive terms are joined with ``default_mode``. Otherwise terms and
    operators must strictly alternate.

    Raises:
        InvalidQueryError: For empty queries or misplaced operators
    """
    pieces = split_words(words)
    terms: list[str] = []
    operators: list[Operator] = []
    explicit = any(piece in OPERATORS for piece in pieces)

    expect_term = True
    for piece in pieces:
        operator = OPERATORS.get(piece)
        if operator is not None:
            if expect_term:
                raise InvalidQueryError(f"Unexpected operator '{piece}'", terms=terms)
            operators.append(operator)
            expect_term = True
            continue

        name = piece.lstrip("@")
        if not name:
            raise InvalidQueryError(f"Invalid search term '{piece}'", terms=terms)
        if explicit and not expect_term:
            raise InvalidQueryError(
                f"Missing operator before '{piece}'", terms=terms
            )
        if not explicit and terms:
            operators.append(default_mode)
        terms.append(name)
        expect_term = False

    return build_expression(terms, operators)
