from dataclasses import dataclass
from datetime import datetime

from core.domain.models.task import Deadline, Event, Task, Todo
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class AddTaskCommand:
    kind: str
    description: str
    by: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None


def build_task(cmd: AddTaskCommand) -> Task:
    """
    Build the task variant described by ``cmd``.

    Raises:
        ValueError: for an unknown kind, an empty description or missing dates.
    """
    kind = cmd.kind.strip().lower()
    if not cmd.description or not cmd.description.strip():
        raise ValueError("Description cannot be empty")
    description = cmd.description

    if kind == "todo":
        return Todo(description)
    if kind == "deadline":
        if cmd.by is None:
            raise ValueError("A deadline needs a 'by' date")
        return Deadline(description, cmd.by)
    if kind == "event":
        if cmd.start is None or cmd.end is None:
            raise ValueError("An event needs both 'from' and 'to' dates")
        return Event(description, cmd.start, cmd.end)
    raise ValueError(f"Unknown task kind '{cmd.kind}'")


class AddTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: AddTaskCommand) -> Task:
        task = build_task(cmd)
        task_list = self._repository.load()
        task_list.add(task)
        self._repository.save(task_list)
        return task
