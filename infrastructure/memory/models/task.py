from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from core.domain.models.task import Deadline, Event, Task, TaskType, Todo


class TaskRecord(BaseModel):
    """
    Flat record of a task, as exchanged with storage adapters.

    ``by`` is set only for deadlines, ``start`` and ``end`` only for events.
    """

    type: Literal["T", "D", "E"]
    description: str
    is_done: bool = False
    by: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None

    @field_validator("by", "start", "end")
    @classmethod
    def _naive_only(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            raise ValueError("dates must not carry a UTC offset")
        return value

    @model_validator(mode="after")
    def _check_dates(self) -> "TaskRecord":
        if self.type == TaskType.DEADLINE.value and self.by is None:
            raise ValueError("A deadline record needs 'by'")
        if self.type == TaskType.EVENT.value and (self.start is None or self.end is None):
            raise ValueError("An event record needs 'start' and 'end'")
        return self

    def to_domain(self) -> Task:
        """
        Convert the record into its task variant.

        Returns:
            Task: Todo, Deadline or Event depending on ``type``.
        """
        if self.type == TaskType.DEADLINE.value:
            return Deadline(self.description, self.by, is_done=self.is_done)
        if self.type == TaskType.EVENT.value:
            return Event(self.description, self.start, self.end, is_done=self.is_done)
        return Todo(self.description, is_done=self.is_done)

    @classmethod
    def from_domain(cls, task: Task) -> "TaskRecord":
        """
        Create a record from a task variant.

        Args:
            task (Task): The domain task.
        """
        dates: dict[str, datetime] = {}
        if task.task_type() == TaskType.DEADLINE.value:
            dates["by"] = task.by
        elif task.task_type() == TaskType.EVENT.value:
            dates["start"] = task.start
            dates["end"] = task.end
        return cls(
            type=task.task_type(),
            description=task.description,
            is_done=task.is_done,
            **dates,
        )
