import logging

import pytest

from core.application.add_task import AddTaskCommand
from infrastructure import container
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.settings import Settings


@pytest.fixture(autouse=True)
def fresh_repository():
    container.reset_task_repository()
    yield
    container.reset_task_repository()


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("TASKS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TASKS_REPOSITORY", raising=False)

    settings = Settings.from_env()

    assert settings.log_level == "INFO"
    assert settings.repository == "memory"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_REPOSITORY", " Memory ")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.repository == "memory"


def test_repository_is_shared_between_use_cases(monkeypatch):
    monkeypatch.setenv("TASKS_REPOSITORY", "memory")

    container.get_add_task_use_case().execute(AddTaskCommand(kind="todo", description="read"))
    tasks = container.get_list_tasks_use_case().execute()

    assert isinstance(container.get_task_repository(), InMemoryTaskRepository)
    assert [t.description for t in tasks] == ["read"]


def test_unknown_repository_is_rejected(monkeypatch):
    monkeypatch.setenv("TASKS_REPOSITORY", "postgres")

    with pytest.raises(ValueError, match="Unknown task repository"):
        container.get_task_repository()


def test_logging_level_comes_from_settings(monkeypatch):
    monkeypatch.setenv("TASKS_LOG_LEVEL", "WARNING")

    container.get_task_repository()

    assert logging.getLogger().level == logging.WARNING
