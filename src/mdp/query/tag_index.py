"""
Tag index over a token tree.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from mdp.markdown.tokens import Tag
from mdp.markdown.tree import Tree, TreeNode


class TagOrdering(str, Enum):
    """Ordering of enumerated tags."""

    ALPHABETIC = "alphabetic"
    COUNT = "count"


@dataclass
class TagOccurrence:
    """One occurrence of a tag in the tree."""

    section: int | None  # index into Tree.sections
    node: TreeNode


@dataclass
class TagEntry:
    """All occurrences of one tag name."""

    name: str
    count: int = 0
    occurrences: list[TagOccurrence] = field(default_factory=list)
    # dict keys keep first-seen order
    _sections: dict[int, None] = field(default_factory=dict, repr=False)

    def add(self, occurrence: TagOccurrence) -> None:
        """Record one more occurrence of this tag."""
        self.count += 1
        self.occurrences.append(occurrence)
        if occurrence.section is not None:
            self._sections[occurrence.section] = None

    def sections(self) -> list[int]:
        """Sections mentioning this tag, in document order, deduplicated."""
        return list(self._sections)

    def mentions(self, section: int) -> bool:
        """Check whether a section mentions this tag."""
        return section in self._sections


class TagIndex(Mapping[str, TagEntry]):
    """Read-only mapping from tag name to its TagEntry."""

    def __init__(self, entries: dict[str, TagEntry] | None = None):
        self._entries: dict[str, TagEntry] = entries or {}

    @classmethod
    def from_tree(cls, tree: Tree) -> "TagIndex":
        """Index every Tag token of a tree in one depth-first pass."""
        entries: dict[str, TagEntry] = {}
        for node in tree.walk():
            if not isinstance(node.token, Tag):
                continue
            entry = entries.setdefault(node.token.name, TagEntry(name=node.token.name))
            entry.add(TagOccurrence(section=node.section, node=node))

        logger.debug(f"Indexed {len(entries)} distinct tags")
        return cls(entries)

    def __getitem__(self, name: str) -> TagEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def sections_for(self, name: str) -> list[int]:
        """Sections mentioning a tag. Unknown tags yield an empty list."""
        entry = self._entries.get(name)
        if entry is None:
            return []
        return entry.sections()

    def mentions(self, name: str, section: int) -> bool:
        """Check whether a section mentions a tag."""
        entry = self._entries.get(name)
        return entry is not None and entry.mentions(section)

    def counts(self, ordering: TagOrdering = TagOrdering.ALPHABETIC) -> list[tuple[str, int]]:
        """
        Enumerate (name, count) pairs.

        Args:
            ordering: ALPHABETIC sorts by name; COUNT sorts by ascending count,
                then by name

        Returns:
            List of (tag name, occurrence count) tuples
        """
        rows = [(entry.name, entry.count) for entry in self._entries.values()]
        if ordering == TagOrdering.COUNT:
            return sorted(rows, key=lambda row: (row[1], row[0]))
        return sorted(rows, key=lambda row: row[0])


def index(tree: Tree) -> TagIndex:
    """Build the tag index of a tree."""
    return TagIndex.from_tree(tree)
