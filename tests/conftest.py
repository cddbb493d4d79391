"""Pytest fixtures for diary tests."""

import pytest

from mdp.markdown import build, lex
from mdp.query import index


@pytest.fixture
def diary_text():
    """A diary with three dated sections, nested headings, tags and tasks."""
    return """# 2022-11-01

Lecture on compilers @school

## Evening

Dinner with @anna and @roger
TODO: Clean Room

---

# 2022-11-02

@school

### Notes

Write to roger.example@gmail.com about @school trip
DONE: Clean Kitchen

# 2022-11-03

## Morning

Library visit @reading
DOING: Read chapter 3
TODO UNTIL 2022-11-05: Hand in essay
REVIEW: Pull request
"""


@pytest.fixture
def diary_tree(diary_text):
    """Token tree of diary_text."""
    return build(lex(diary_text))


@pytest.fixture
def diary_index(diary_tree):
    """Tag index of diary_tree."""
    return index(diary_tree)


@pytest.fixture
def diary_file(tmp_path, diary_text):
    """diary_text written to a file."""
    path = tmp_path / "diary.md"
    path.write_text(diary_text, encoding="utf-8")
    return path
