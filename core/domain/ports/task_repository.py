from abc import ABC, abstractmethod

from core.domain.models.task_list import TaskList


class TaskRepository(ABC):
    @abstractmethod
    def load(self) -> TaskList:
        raise NotImplementedError

    @abstractmethod
    def save(self, task_list: TaskList) -> None:
        raise NotImplementedError
