from __future__ import annotations
from typing import List, Protocol, Tuple

from tasktracker.domain.task_models import ListFilter, Task, TaskDraft


class TaskRepo(Protocol):
    """
    Storage contract used by TaskService.

    Implementations own the canonical task collection and hand out copies.
    Missing ids raise TaskNotFoundError.
    """

    def create(self, draft: TaskDraft) -> int: ...

    def get(self, task_id: int) -> Task: ...

    def update(self, task: Task) -> None: ...

    def delete(self, task_id: int) -> None: ...

    def list(self, flt: ListFilter) -> Tuple[List[Task], int]: ...
