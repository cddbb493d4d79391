"""Tests for output formatting."""

from datetime import date

from rich.console import Console

from mdp.formatting import (
    format_search_results,
    format_tag_counts,
    format_task,
    serialize_section,
    tag_table,
    token_tree,
)
from mdp.markdown import Heading, PlainText, Tag, TaskKind, TaskMarker, build
from mdp.query import Term, search


def render(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestSerializeSection:
    """Test markdown serialization of sections."""

    def test_groups_inline_tokens_by_line(self, diary_tree):
        assert serialize_section(diary_tree.sections[0]) == (
            "# 2022-11-01\n\n"
            "Lecture on compilers @school\n\n"
            "## Evening\n\n"
            "Dinner with @anna and @roger\n\n"
            "TODO: Clean Room"
        )

    def test_email_and_nested_heading(self, diary_tree):
        assert serialize_section(diary_tree.sections[1]) == (
            "# 2022-11-02\n\n"
            "@school\n\n"
            "### Notes\n\n"
            "Write to roger.example@gmail.com about @school trip\n\n"
            "DONE: Clean Kitchen"
        )

    def test_nodes_without_lines_are_separate_blocks(self):
        tree = build([Heading(1, "2022-11-02"), PlainText("a"), Tag("b")])
        assert serialize_section(tree.sections[0]) == "# 2022-11-02\n\na\n\n@b"


class TestFormatting:
    """Test task, tag and search result formatting."""

    def test_format_task(self):
        assert format_task(TaskMarker(TaskKind.DONE, "Clean Kitchen")) == "DONE: Clean Kitchen"
        assert (
            format_task(TaskMarker(TaskKind.TODO_UNTIL, "Essay", due=date(2022, 11, 5)))
            == "TODO UNTIL 2022-11-05: Essay"
        )

    def test_format_search_results(self, diary_tree, diary_index):
        output = format_search_results(search(diary_tree, diary_index, Term("school")))
        first, second = output.split("\n\n---\n\n")
        assert first.startswith("# 2022-11-01")
        assert second.startswith("# 2022-11-02")

    def test_format_tag_counts(self):
        assert format_tag_counts([("school", 3)]) == (
            f"{'Tag':<20} {'Count':>10}\n" f"{'school':<20} {3:>10}\n"
        )

    def test_tag_table(self):
        text = render(tag_table([("school", 3), ("roger", 1)]))
        assert "@school" in text
        assert "3" in text
        assert "@roger" in text

    def test_token_tree(self, diary_tree):
        text = render(token_tree(diary_tree, "diary.md"))
        assert "diary.md" in text
        assert "# 2022-11-01" in text
        assert "## Evening" in text
        assert "TODO: Clean Room" in text

    def test_token_tree_debug(self, diary_tree):
        text = render(token_tree(diary_tree, "diary.md", debug=True))
        assert "<HeadingH1: '2022-11-01'>" in text
        assert "<Tag: 'school'>" in text
        assert "<Email: 'roger.example@gmail.com'>" in text

    def test_token_tree_escapes_markup(self):
        tree = build([Heading(1, "2022-11-02"), PlainText("[bold]not markup[/bold]")])
        assert "[bold]not markup[/bold]" in render(token_tree(tree, "diary.md"))
