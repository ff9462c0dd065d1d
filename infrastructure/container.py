from core.application.add_task import AddTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.find_tasks import FindTasksUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.list_tasks_by_date import ListTasksByDateUseCase
from core.application.mark_task import MarkTaskUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.logging_setup import setup_logging
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.settings import get_settings

_repository: TaskRepository | None = None


def get_task_repository() -> TaskRepository:
    """
    Return the process-wide repository (Singleton), creating it on first use.
    """
    global _repository
    if _repository is None:
        settings = get_settings()
        setup_logging(settings.log_level)
        if settings.repository != "memory":
            raise ValueError(f"Unknown task repository '{settings.repository}'")
        _repository = InMemoryTaskRepository()
    return _repository


def reset_task_repository() -> None:
    global _repository
    _repository = None


def get_add_task_use_case() -> AddTaskUseCase:
    return AddTaskUseCase(repository=get_task_repository())


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository())


def get_find_tasks_use_case() -> FindTasksUseCase:
    return FindTasksUseCase(repository=get_task_repository())


def get_mark_task_use_case() -> MarkTaskUseCase:
    return MarkTaskUseCase(repository=get_task_repository())


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(repository=get_task_repository())


def get_list_tasks_by_date_use_case() -> ListTasksByDateUseCase:
    return ListTasksByDateUseCase(repository=get_task_repository())


def get_update_task_use_case() -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=get_task_repository())
