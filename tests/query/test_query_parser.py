"""Tests for query expressions and the query parser."""

import pytest

from mdp.errors import InvalidQueryError, MdpError
from mdp.query.ast import And, Operator, Or, Term, build_expression, term_names
from mdp.query.parser import parse_query, split_words


class TestBuildExpression:
    """Test folding terms and operators into an expression."""

    def test_single_term(self):
        assert build_expression(["school"], []) == Term("school")

    def test_two_terms(self):
        assert build_expression(["roger", "school"], [Operator.AND]) == And(
            Term("roger"), Term("school")
        )

    def test_left_to_right_without_precedence(self):
        """Test that a OR b AND c groups as (a OR b) AND c."""
        expression = build_expression(["a", "b", "c"], [Operator.OR, Operator.AND])
        assert expression == And(Or(Term("a"), Term("b")), Term("c"))

    def test_and_before_or(self):
        """Test that a AND b OR c groups as (a AND b) OR c."""
        expression = build_expression(["a", "b", "c"], [Operator.AND, Operator.OR])
        assert expression == Or(And(Term("a"), Term("b")), Term("c"))

    def test_missing_operator(self):
        """Test two terms and no operator."""
        with pytest.raises(InvalidQueryError, match="Expected 1 operator"):
            build_expression(["roger", "school"], [])

    def test_too_many_operators(self):
        """Test more operators than gaps between terms."""
        with pytest.raises(InvalidQueryError):
            build_expression(["roger"], [Operator.AND])

    def test_no_terms(self):
        """Test an empty query."""
        with pytest.raises(InvalidQueryError, match="at least one term"):
            build_expression([], [])

    def test_invalid_query_is_mdp_error(self):
        """Test the exception hierarchy."""
        with pytest.raises(MdpError):
            build_expression(["a", "b"], [])

    def test_term_names(self):
        """Test collecting names from an expression."""
        expression = build_expression(["a", "b", "a"], [Operator.OR, Operator.AND])
        assert term_names(expression) == ["a", "b"]


class TestParseQuery:
    """Test parsing of command line query words."""

    def test_split_words(self):
        assert split_words(["school,roger", "AND", " anna "]) == ["school", "roger", "AND", "anna"]

    def test_single_term(self):
        assert parse_query(["school"]) == Term("school")

    def test_strips_at_sign(self):
        assert parse_query(["@school"]) == Term("school")

    def test_explicit_operators(self):
        assert parse_query(["school", "AND", "roger", "OR", "anna"]) == Or(
            And(Term("school"), Term("roger")), Term("anna")
        )

    def test_comma_list_uses_default_mode(self):
        assert parse_query(["school,roger"]) == Or(Term("school"), Term("roger"))
        assert parse_query(["school,roger"], default_mode=Operator.AND) == And(
            Term("school"), Term("roger")
        )

    def test_lowercase_words_are_terms(self):
        """Test that only uppercase AND / OR are operators."""
        assert parse_query(["and"]) == Term("and")

    def test_leading_operator(self):
        with pytest.raises(InvalidQueryError, match="Unexpected operator"):
            parse_query(["AND", "school"])

    def test_double_operator(self):
        with pytest.raises(InvalidQueryError, match="Unexpected operator"):
            parse_query(["school", "AND", "OR", "roger"])

    def test_trailing_operator(self):
        with pytest.raises(InvalidQueryError):
            parse_query(["school", "AND"])

    def test_missing_operator_between_terms(self):
        with pytest.raises(InvalidQueryError, match="Missing operator"):
            parse_query(["school", "roger", "AND", "anna"])

    def test_empty_query(self):
        with pytest.raises(InvalidQueryError):
            parse_query([])

    def test_bare_at_sign(self):
        with pytest.raises(InvalidQueryError, match="Invalid search term"):
            parse_query(["@"])
