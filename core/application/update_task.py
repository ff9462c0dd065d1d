from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class UpdateTaskCommand:
    index: int
    kind: str
    value: str


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: UpdateTaskCommand) -> Task:
        task_list = self._repository.load()
        updated = task_list.update(cmd.index, cmd.kind, cmd.value)
        self._repository.save(task_list)
        return updated
