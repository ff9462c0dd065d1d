class TaskIndexError(IndexError):
    """A task number outside ``0 <= index < size``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Task index {index} out of range (size {size})")
        self.index = index
        self.size = size


class TaskListError(Exception):
    """Base error for operations rejected by the task list."""


class NoMatchingTasksError(TaskListError):
    def __init__(self, keyword: str) -> None:
        super().__init__("No matching tasks found")
        self.keyword = keyword


class TaskUpdateError(TaskListError):
    pass


class InvalidTaskNumberError(TaskListError):
    def __init__(self) -> None:
        super().__init__("Please enter a valid task number")
