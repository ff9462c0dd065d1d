from dataclasses import dataclass

from core.domain.models.task_list import TaskList
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class FindTasksCommand:
    keyword: str


class FindTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: FindTasksCommand) -> TaskList:
        return self._repository.load().find(cmd.keyword)
