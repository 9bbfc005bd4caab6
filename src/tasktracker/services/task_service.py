import logging
from typing import List, Optional, Tuple
from tasktracker.domain.errors import TaskValidationError
from tasktracker.domain.task_models import ListFilter, Task, TaskDraft, TaskStatus
from tasktracker.domain.task_repo import TaskRepo

logger = logging.getLogger("tasktracker.tasks")

DEFAULT_PAGE_SIZE = 10

class TaskService:
    def __init__(self, repo: TaskRepo):
        self.repo = repo

    def create_task(self, title: str, description: Optional[str] = None) -> Task:
        if not title or not title.strip():
            raise TaskValidationError("title required")
        task_id = self.repo.create(TaskDraft(
            title=title,
            description=description or None,
            status=TaskStatus.pending,
        ))
        logger.info("task.create", extra={"category": "tasks", "event": "task.create", "task_id": task_id, "title": title})
        return self.repo.get(task_id)

    def get_task(self, task_id: int) -> Task:
        return self.repo.get(task_id)

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Task:
        """None leaves a field as it is; an empty description clears it."""
        task = self.repo.get(task_id)
        if title is not None:
            if not title.strip():
                raise TaskValidationError("title cannot be empty")
            task.title = title
        if description is not None:
            task.description = description or None
        if status is not None:
            task.status = status

        self.repo.update(task)
        logger.info("task.update", extra={"category": "tasks", "event": "task.update", "task_id": task_id, "status": task.status.value})
        return self.repo.get(task_id)

    def delete_task(self, task_id: int) -> None:
        self.repo.delete(task_id)
        logger.info("task.delete", extra={"category": "tasks", "event": "task.delete", "task_id": task_id})

    def list_tasks(self, page: int, size: int, status: Optional[TaskStatus] = None) -> Tuple[List[Task], int]:
        page = max(page, 1)
        if size < 1:
            size = DEFAULT_PAGE_SIZE
        return self.repo.list(ListFilter(status=status, offset=(page - 1) * size, limit=size))
