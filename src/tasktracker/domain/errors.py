from __future__ import annotations


class TaskError(Exception):
    """Base class for every failure raised by the task layers."""


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int):
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id


class TaskValidationError(TaskError):
    pass
