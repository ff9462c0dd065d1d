import logging
from typing import Iterable

from core.domain.errors import (
    InvalidTaskNumberError,
    NoMatchingTasksError,
    TaskIndexError,
    TaskUpdateError,
)
from core.domain.models.task import DatedTask, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, index-addressed collection of tasks.

    Indices are 0-based and are the only identity a task has here: deleting
    a task shifts every later task down by one.

    Index-based methods raise ``TaskIndexError`` for an index outside
    ``0 <= index < size``. Domain failures raise ``TaskListError`` subclasses.
    """

    def __init__(self, *tasks: Task) -> None:
        if any(task is None for task in tasks):
            raise ValueError("Tasks cannot be None")
        self._tasks: list[Task] = list(tasks)

    @classmethod
    def from_sequence(cls, tasks: Iterable[Task]) -> "TaskList":
        """
        Build a TaskList from existing tasks.

        The sequence is copied: later changes to it do not reach the list.
        """
        if tasks is None:
            raise ValueError("Tasks cannot be None")
        return cls(*tasks)

    # ── Queries ──────────────────────────────────────────────────────────────

    def snapshot(self) -> list[Task]:
        return list(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def describe(self, index: int) -> str:
        return str(self._get(index))

    def status_of(self, index: int) -> str:
        return self._get(index).status_icon()

    def type_of(self, index: int) -> str:
        return self._get(index).task_type()

    def find(self, keyword: str) -> "TaskList":
        """
        Return the tasks whose description contains ``keyword``.

        Matching is a case-sensitive substring test and keeps the original
        relative order.

        Raises:
            NoMatchingTasksError: if no task matches.
        """
        if keyword is None:
            raise ValueError("Keyword cannot be None")
        matches = TaskList(*(t for t in self._tasks if keyword in t.description))
        if matches.size() == 0:
            logger.debug(f"🔍 No tasks match '{keyword}'")
            raise NoMatchingTasksError(keyword)
        logger.debug(f"🔍 {matches.size()} task(s) match '{keyword}'")
        return matches

    def sorted_by_date(self) -> list[Task]:
        """
        Return deadlines and events ordered by date, earliest first.

        Deadlines sort by their due date, events by their start. Tasks
        without a date are left out, and equal dates keep list order.
        """
        dated = [t for t in self._tasks if isinstance(t, DatedTask)]
        return sorted(dated, key=lambda t: t.sort_key())

    # ── Mutations ────────────────────────────────────────────────────────────

    def add(self, task: Task) -> None:
        if task is None:
            raise ValueError("Task cannot be None")
        self._tasks.append(task)
        logger.info(f"➕ Added task #{len(self._tasks) - 1}: {task}")

    def delete(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        logger.info(f"🗑️ Deleted task #{index}: {removed}")
        return removed

    def mark_done(self, index: int) -> None:
        self._get(index).mark_as_done()
        logger.info(f"✅ Marked task #{index} as done")

    def mark_undone(self, index: int) -> None:
        self._get(index).mark_as_undone()
        logger.info(f"↩️ Marked task #{index} as not done")

    def update(self, index: int, kind: str, value: str) -> Task:
        """
        Replace the task at ``index`` with its updated version.

        Args:
            index: Position of the task.
            kind:  Field to change, as understood by the task variant.
            value: New value for that field.

        Returns:
            The task now stored at ``index``.

        Raises:
            InvalidTaskNumberError: if ``index`` is out of range.
            TaskUpdateError: if the variant rejects the field or the value.
        """
        try:
            updated = self._get(index).update(kind, value)
        except TaskIndexError as e:
            logger.warning(f"⚠️ Update rejected: {e}")
            raise InvalidTaskNumberError() from e
        except ValueError as e:
            logger.warning(f"⚠️ Update of task #{index} rejected: {e}")
            raise TaskUpdateError(f"Error updating task: {e}") from e
        self._tasks[index] = updated
        logger.info(f"✏️ Updated task #{index}: {updated}")
        return updated

    # ── Helpers ──────────────────────────────────────────────────────────────

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def _get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]
