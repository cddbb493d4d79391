"""
Lexical analyzer (tokenizer) for diary markdown.
"""

import re
from datetime import date

from loguru import logger

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


class DiaryLexer:
    """Tokenizer for diary documents.

    Block-level tokens (headings, rules, task markers) are recognized per line,
    everything else is scanned for inline tags and emails. The lexer never
    fails: anything unrecognized ends up as PlainText.
    """

    # Regex patterns
    HEADING = re.compile(r"^(#{1,6})\s+(.+)$")
    HORIZONTAL_RULE = re.compile(r"^\s*---\s*$")
    TASK = re.compile(
        r"^(?P<keyword>TODO|DOING|REVIEW|DONE)"
        r"(?:\s+UNTIL\s+(?P<due>\d{4}-\d{2}-\d{2}))?"
        r"\s*:\s*(?P<description>.*)$"
    )
    # Emails are tried before tags at every position
    INLINE = re.compile(
        r"(?P<email>[\w.+%-]+@[\w-]+(?:\.[\w-]+)+)"
        r"|@(?P<tag>[\w-]+)"
    )

    def __init__(self, text: str):
        self.text = text
        self.tokens: list[LexedToken] = []

    def tokenize(self) -> list[LexedToken]:
        """Tokenize the entire input."""
        for line_number, line in enumerate(self.text.splitlines(), start=1):
            for token in self._tokenize_line(line):
                self.tokens.append(LexedToken(line_number, token))

        logger.debug(f"Lexed {len(self.tokens)} tokens")
        return self.tokens

    def _tokenize_line(self, line: str) -> list[Token]:
        """Tokenize a single line."""
        if not line.strip():
            return []

        heading = self._match_heading(line)
        if heading:
            return [heading]

        if self.HORIZONTAL_RULE.match(line):
            return [HorizontalRule()]

        task = self._match_task(line.strip())
        if task:
            return [task]

        return self._scan_inline(line)

    def _match_heading(self, line: str) -> Heading | None:
        """Match '#' to '######' headings."""
        match = self.HEADING.match(line.rstrip())
        if not match:
            return None
        hashes, text = match.groups()
        text = text.strip()
        if not text:
            return None
        return Heading(level=len(hashes), text=text)

    def _match_task(self, line: str) -> TaskMarker | None:
        """Match task marker lines. Malformed markers return None."""
        match = self.TASK.match(line)
        if not match:
            return None

        keyword = match.group("keyword")
        due_text = match.group("due")
        description = match.group("description").strip()

        if due_text is None:
            return TaskMarker(kind=TaskKind(keyword), description=description)

        # UNTIL is only meaningful for TODO
        if keyword != "TODO":
            return None
        try:
            due = date.fromisoformat(due_text)
        except ValueError:
            return None
        return TaskMarker(kind=TaskKind.TODO_UNTIL, description=description, due=due)

    def _scan_inline(self, line: str) -> list[Token]:
        """Split a line into PlainText, Tag and EmailLike tokens."""
        tokens: list[Token] = []
        pos = 0

        for match in self.INLINE.finditer(line):
            self._append_text(tokens, line[pos : match.start()])
            if match.group("email"):
                tokens.append(EmailLike(match.group("email")))
            else:
                tokens.append(Tag(match.group("tag")))
            pos = match.end()

        self._append_text(tokens, line[pos:])
        return tokens

    @staticmethod
    def _append_text(tokens: list[Token], text: str):
        text = text.strip()
        if text:
            tokens.append(PlainText(text))


def lex(text: str) -> list[LexedToken]:
    """Tokenize a complete diary document."""
    return DiaryLexer(text).tokenize()
