import logging
from typing import Any

from core.domain.models.task_list import TaskList
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.models.task import TaskRecord

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    TaskRepository kept in process memory.

    Tasks are stored as plain record dicts, so every ``load()`` builds fresh
    task objects and never shares them with a previously saved list.
    """

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self._records: list[dict[str, Any]] = [
            TaskRecord.model_validate(r).model_dump() for r in records or []
        ]

    def load(self) -> TaskList:
        tasks = [TaskRecord.model_validate(r).to_domain() for r in self._records]
        logger.debug(f"📂 Loaded {len(tasks)} task(s)")
        return TaskList.from_sequence(tasks)

    def save(self, task_list: TaskList) -> None:
        self._records = [
            TaskRecord.from_domain(task).model_dump() for task in task_list.snapshot()
        ]
        logger.debug(f"💾 Saved {len(self._records)} task(s)")

    def records(self) -> list[dict[str, Any]]:
        return [dict(r) for r in self._records]
