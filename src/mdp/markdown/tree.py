"""
Token tree for diary documents.

Converts the flat token sequence into a tree whose nesting follows the
markdown heading levels.
"""

import datetime
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from loguru import logger

from mdp.markdown.tokens import Heading, HorizontalRule, LexedToken, Token

DATE_PATTERN = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")


@dataclass(eq=False)
class TreeNode:
    """A token and its ordered children."""

    token: Token
    children: list["TreeNode"] = field(default_factory=list)
    line: int | None = None
    section: int | None = None  # index into Tree.sections

    @property
    def level(self) -> int | None:
        """Heading level, or None for leaf tokens."""
        if isinstance(self.token, Heading):
            return self.token.level
        return None

    @property
    def date(self) -> datetime.date | None:
        """Date named in a heading's text."""
        if not isinstance(self.token, Heading):
            return None
        match = DATE_PATTERN.search(self.token.text)
        if not match:
            return None
        try:
            return datetime.date.fromisoformat(match.group(1))
        except ValueError:
            return None

    @property
    def display_text(self) -> str:
        return self.token.to_markdown()

    def walk(self) -> Iterator["TreeNode"]:
        """Yield this node and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"TreeNode({self.token!r}, children={len(self.children)})"


@dataclass
class Tree:
    """Synthetic root of a diary document."""

    children: list[TreeNode] = field(default_factory=list)
    sections: list[TreeNode] = field(default_factory=list)

    def walk(self) -> Iterator[TreeNode]:
        """Yield every node depth-first in document order."""
        for child in self.children:
            yield from child.walk()

    def section_of(self, node: TreeNode) -> TreeNode | None:
        """Return the date section enclosing a node."""
        if node.section is None:
            return None
        return self.sections[node.section]

    def __repr__(self) -> str:
        return f"Tree(children={len(self.children)}, sections={len(self.sections)})"


class TreeBuilder:
    """Builds a Tree from tokens using a stack of open headings."""

    def __init__(self, tokens: Iterable[LexedToken | Token]):
        self.tokens = tokens
        self.tree = Tree()
        self.stack: list[TreeNode] = []

    def build(self) -> Tree:
        """Build the tree. Never fails."""
        for item in self.tokens:
            if isinstance(item, LexedToken):
                self._add(item.token, item.line)
            else:
                self._add(item, None)

        logger.debug(f"Built token tree with {len(self.tree.sections)} sections")
        return self.tree

    def _add(self, token: Token, line: int | None):
        if isinstance(token, HorizontalRule):
            return

        if isinstance(token, Heading):
            # Close all open headings of the same or a deeper level
            while self.stack and self.stack[-1].level >= token.level:
                self.stack.pop()

            node = TreeNode(token=token, line=line)
            if token.level == 1:
                node.section = len(self.tree.sections)
                self.tree.sections.append(node)
            else:
                node.section = self._current_section()
            self._attach(node)
            self.stack.append(node)
            return

        self._attach(TreeNode(token=token, line=line, section=self._current_section()))

    def _attach(self, node: TreeNode):
        if self.stack:
            self.stack[-1].children.append(node)
        else:
            self.tree.children.append(node)

    def _current_section(self) -> int | None:
        if not self.stack:
            return None
        return self.stack[0].section


def build(tokens: Iterable[LexedToken | Token]) -> Tree:
    """Assemble a token tree from a token sequence."""
    return TreeBuilder(tokens).build()
