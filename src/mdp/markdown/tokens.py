"""
Token definitions for diary markdown.

Tokens form a closed set of immutable dataclasses. Traversals dispatch on them
with isinstance checks.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union


class TaskKind(Enum):
    """State keyword of a task marker."""

    TODO = "TODO"
    TODO_UNTIL = "TODO UNTIL"
    DOING = "DOING"
    REVIEW = "REVIEW"
    DONE = "DONE"


@dataclass(frozen=True)
class Heading:
    """Markdown heading (e.g., '## Evening')."""

    level: int
    text: str

    def to_markdown(self) -> str:
        return f"{'#' * self.level} {self.text}"

    def to_debug(self) -> str:
        return f"<HeadingH{self.level}: '{self.text}'>"


@dataclass(frozen=True)
class HorizontalRule:
    """A '---' separator line."""

    def to_markdown(self) -> str:
        return "---"

    def to_debug(self) -> str:
        return "<HRule>"


@dataclass(frozen=True)
class PlainText:
    """Text run between inline tokens."""

    text: str

    def to_markdown(self) -> str:
        return self.text

    def to_debug(self) -> str:
        return f"<Text: '{self.text}'>"


@dataclass(frozen=True)
class Tag:
    """Inline '@name' tag. The name is stored without the '@'."""

    name: str

    def to_markdown(self) -> str:
        return f"@{self.name}"

    def to_debug(self) -> str:
        return f"<Tag: '{self.name}'>"


@dataclass(frozen=True)
class EmailLike:
    """Email address, kept whole so its domain is never read as a tag."""

    text: str

    def to_markdown(self) -> str:
        return self.text

    def to_debug(self) -> str:
        return f"<Email: '{self.text}'>"


@dataclass(frozen=True)
class TaskMarker:
    """Task line such as 'TODO UNTIL 2022-11-05: pay rent'."""

    kind: TaskKind
    description: str
    due: date | None = None  # only set for TODO_UNTIL

    @property
    def label(self) -> str:
        if self.kind == TaskKind.TODO_UNTIL and self.due is not None:
            return f"TODO UNTIL {self.due.isoformat()}"
        return self.kind.value

    @property
    def is_finished(self) -> bool:
        return self.kind == TaskKind.DONE

    def to_markdown(self) -> str:
        return f"{self.label}: {self.description}"

    def to_debug(self) -> str:
        return f"<Task({self.label}): '{self.description}'>"


Token = Union[Heading, HorizontalRule, PlainText, Tag, EmailLike, TaskMarker]


@dataclass(frozen=True)
class LexedToken:
    """A token together with the (1-based) source line it came from."""

    line: int
    token: Token

    def __repr__(self) -> str:
        return f"LexedToken({self.line}, {self.token!r})"
