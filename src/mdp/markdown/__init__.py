"""
Diary markdown tokenizer and token tree builder.
"""

from mdp.markdown.lexer import DiaryLexer, lex
from mdp.markdown.tokens import (
    EmailLike,
    Heading,
    HorizontalRule,
    LexedToken,
    PlainText,
    Tag,
    TaskKind,
    TaskMarker,
    Token,
)
from mdp.markdown.tree import Tree, TreeBuilder, TreeNode, build

__all__ = [
    # Lexer
    "DiaryLexer",
    "lex",
    # Tokens
    "EmailLike",
    "Heading",
    "HorizontalRule",
    "LexedToken",
    "PlainText",
    "Tag",
    "TaskKind",
    "TaskMarker",
    "Token",
    # Tree
    "Tree",
    "TreeBuilder",
    "TreeNode",
    "build",
]
