"""
Task extractor for diary token trees.
"""

from datetime import date
from enum import Enum

from mdp.markdown.tokens import TaskKind, TaskMarker
from mdp.markdown.tree import Tree


class TaskFilter(str, Enum):
    """Which tasks to keep."""

    ALL = "all"
    UNFINISHED = "unfinished"
    FINISHED = "finished"


class TaskOrdering(str, Enum):
    """Ordering of extracted tasks."""

    OCCURRENCE = "occurrence"
    URGENCY = "urgency"


URGENCY = {
    TaskKind.DONE: 0,
    TaskKind.REVIEW: 10,
    TaskKind.DOING: 20,
    TaskKind.TODO: 30,
}


class TaskExtractor:
    """Extracts task markers from a token tree."""

    @classmethod
    def extract_tasks(cls, tree: Tree) -> list[TaskMarker]:
        """
        Extract all task markers from a tree.

        Args:
            tree: Token tree

        Returns:
            List of TaskMarker tokens in document order
        """
        return [node.token for node in tree.walk() if isinstance(node.token, TaskMarker)]

    @classmethod
    def filter_tasks(cls, tasks: list[TaskMarker], task_filter: TaskFilter) -> list[TaskMarker]:
        """Keep all, only unfinished or only finished tasks."""
        if task_filter == TaskFilter.FINISHED:
            return [task for task in tasks if task.is_finished]
        if task_filter == TaskFilter.UNFINISHED:
            return [task for task in tasks if not task.is_finished]
        return list(tasks)

    @classmethod
    def urgency(cls, task: TaskMarker, today: date) -> int:
        """Urgency score, lower is more urgent.

        Tasks with a due date grow less urgent the further away the date is,
        and overdue tasks fall behind even faster.
        """
        if task.due is None:
            return URGENCY.get(task.kind, URGENCY[TaskKind.TODO])
        days_until = (task.due - today).days
        if days_until > 0:
            return 30 + days_until * 10
        return 30 + abs(days_until) * 100

    @classmethod
    def order_tasks(
        cls,
        tasks: list[TaskMarker],
        ordering: TaskOrdering,
        today: date | None = None,
    ) -> list[TaskMarker]:
        """Order tasks by occurrence (unchanged) or by ascending urgency."""
        if ordering == TaskOrdering.OCCURRENCE:
            return list(tasks)
        today = today or date.today()
        return sorted(tasks, key=lambda task: cls.urgency(task, today))


def extract_tasks(tree: Tree) -> list[TaskMarker]:
    """Collect every task marker of a tree in document order."""
    return TaskExtractor.extract_tasks(tree)
