from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class MarkTaskCommand:
    index: int
    done: bool = True


class MarkTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: MarkTaskCommand) -> Task:
        task_list = self._repository.load()
        if cmd.done:
            task_list.mark_done(cmd.index)
        else:
            task_list.mark_undone(cmd.index)
        self._repository.save(task_list)
        return task_list.snapshot()[cmd.index]
