"""
Tests for InMemoryTaskRepository and the TaskRecord it stores.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from core.domain.models.task import Deadline, Event, Todo
from core.domain.models.task_list import TaskList
from infrastructure.memory.models.task import TaskRecord
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


class TestTaskRecord:
    def test_from_domain_deadline(self):
        record = TaskRecord.from_domain(Deadline("report", datetime(2024, 1, 5), is_done=True))

        assert record.type == "D"
        assert record.is_done is True
        assert record.by == datetime(2024, 1, 5)
        assert record.start is None and record.end is None

    @pytest.mark.parametrize("task", [
        Todo("read", is_done=True),
        Deadline("report", datetime(2024, 1, 5)),
        Event("trip", datetime(2024, 1, 1), datetime(2024, 1, 3)),
    ])
    def test_to_domain_restores_variant(self, task):
        assert TaskRecord.from_domain(task).to_domain() == task

    def test_deadline_without_date_is_rejected(self):
        with pytest.raises(ValidationError):
            TaskRecord(type="D", description="report")

    def test_event_without_end_is_rejected(self):
        with pytest.raises(ValidationError):
            TaskRecord(type="E", description="trip", start=datetime(2024, 1, 1))

    def test_date_with_utc_offset_is_rejected(self):
        with pytest.raises(ValidationError):
            TaskRecord(type="D", description="report", by="2024-01-05T18:00:00+00:00")

    def test_from_domain_todo_has_no_dates(self):
        record = TaskRecord.from_domain(Todo("read"))

        assert (record.by, record.start, record.end) == (None, None, None)

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            TaskRecord(type="X", description="?")


class TestInMemoryTaskRepository:
    @pytest.fixture
    def repo(self):
        return InMemoryTaskRepository(
            records=[
                {"type": "T", "description": "read"},
                {"type": "D", "description": "report", "by": "2024-01-05T18:00:00"},
            ]
        )

    def test_load_builds_task_list(self, repo):
        task_list = repo.load()

        assert task_list.size() == 2
        assert task_list.describe(1) == "[D][ ] report (by: Jan 05 2024 18:00)"

    def test_starts_empty(self):
        assert InMemoryTaskRepository().load().size() == 0

    def test_save_then_load(self, repo):
        task_list = repo.load()
        task_list.mark_done(0)
        task_list.add(Event("trip", datetime(2024, 1, 1), datetime(2024, 1, 3)))

        repo.save(task_list)
        reloaded = repo.load()

        assert reloaded.size() == 3
        assert reloaded.status_of(0) == "X"
        assert reloaded.type_of(2) == "E"

    def test_unsaved_changes_are_not_visible(self, repo):
        repo.load().delete(0)

        assert repo.load().size() == 2

    def test_records_are_copies(self, repo):
        records = repo.records()
        records[0]["description"] = "changed"

        assert repo.load().describe(0) == "[T][ ] read"

    def test_save_accepts_empty_list(self, repo):
        repo.save(TaskList())

        assert repo.records() == []
