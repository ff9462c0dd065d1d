from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

DISPLAY_FORMAT = "%b %d %Y %H:%M"


class TaskType(Enum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


class UpdateKind(Enum):
    DESCRIPTION = "description"
    BY = "by"
    FROM = "from"
    TO = "to"

    @classmethod
    def parse(cls, raw: str) -> "UpdateKind":
        try:
            return cls(raw.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown update type '{raw}'") from None


def parse_datetime(raw: str) -> datetime:
    """
    Parse an ISO 8601 date-time such as ``2024-01-05 18:00``.

    Raises:
        ValueError: if the text is not a valid date-time or carries a UTC offset.
    """
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except (AttributeError, ValueError):
        parsed = None
    if parsed is None or parsed.tzinfo is not None:
        raise ValueError(f"Invalid date '{raw}', expected YYYY-MM-DD HH:MM")
    return parsed


def _format(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)


def _checked_description(value: str) -> str:
    if value is None or not value.strip():
        raise ValueError("Description cannot be empty")
    return value


def _check_naive(**dates: datetime) -> None:
    # aware and naive datetimes cannot be compared when sorting
    for name, value in dates.items():
        if value.tzinfo is not None:
            raise ValueError(f"'{name}' must not carry a UTC offset")


@dataclass
class Task(ABC):
    description: str
    is_done: bool = field(default=False, kw_only=True)

    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def task_type(self) -> str:
        return self.TYPE.value

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_undone(self) -> None:
        self.is_done = False

    def update(self, kind: str, value: str) -> "Task":
        """
        Return a copy of this task with one field changed.

        Args:
            kind:  Field to change ("description", "by", "from", "to").
            value: New value as entered by the user.

        Returns:
            A new instance of the same variant; completion state is kept.

        Raises:
            ValueError: if the field does not apply to this variant or the value is invalid.
        """
        update_kind = UpdateKind.parse(kind)
        if update_kind is UpdateKind.DESCRIPTION:
            return replace(self, description=_checked_description(value))
        return self._update_field(update_kind, value)

    def _update_field(self, kind: UpdateKind, value: str) -> "Task":
        raise ValueError(
            f"Cannot update '{kind.value}' of a {type(self).__name__.lower()}"
        )

    @abstractmethod
    def _suffix(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"[{self.task_type()}][{self.status_icon()}] {self.description}{self._suffix()}"


class DatedTask(Task):
    """Task carrying a date that orders it in date listings."""

    @abstractmethod
    def sort_key(self) -> datetime:
        raise NotImplementedError


@dataclass
class Todo(Task):
    TYPE = TaskType.TODO

    def _suffix(self) -> str:
        return ""


@dataclass
class Deadline(DatedTask):
    TYPE = TaskType.DEADLINE

    by: datetime

    def __post_init__(self) -> None:
        _check_naive(by=self.by)

    def sort_key(self) -> datetime:
        return self.by

    def _update_field(self, kind: UpdateKind, value: str) -> Task:
        if kind is UpdateKind.BY:
            return replace(self, by=parse_datetime(value))
        return super()._update_field(kind, value)

    def _suffix(self) -> str:
        return f" (by: {_format(self.by)})"


@dataclass
class Event(DatedTask):
    TYPE = TaskType.EVENT

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _check_naive(start=self.start, end=self.end)
        if self.start > self.end:
            raise ValueError("Event start must not be after its end")

    def sort_key(self) -> datetime:
        return self.start

    def _update_field(self, kind: UpdateKind, value: str) -> Task:
        # replace() re-runs __post_init__, so start <= end still holds
        if kind is UpdateKind.FROM:
            return replace(self, start=parse_datetime(value))
        if kind is UpdateKind.TO:
            return replace(self, end=parse_datetime(value))
        return super()._update_field(kind, value)

    def _suffix(self) -> str:
        return f" (from: {_format(self.start)} to: {_format(self.end)})"
