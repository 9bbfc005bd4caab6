from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Tuple
from datetime import datetime, timezone

from tasktracker.domain.errors import TaskNotFoundError
from tasktracker.domain.task_models import ListFilter, Task, TaskDraft
from tasktracker.infra.db.rwlock import RWLock

logger = logging.getLogger("tasktracker.store")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryTaskRepo:
    """
    In-memory store guarded by a single reader/writer lock.
    Every task going in or out is copied, so callers never hold a reference
    to stored state.
    """
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._lock = RWLock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 0
        self._now = clock or _utcnow
        logger.info("store.ready", extra={"category": "system", "event": "store.ready", "backend": "memory"})

    def create(self, draft: TaskDraft) -> int:
        with self._lock.write():
            self._next_id += 1
            now = self._now()
            task = Task(
                id=self._next_id,
                title=draft.title,
                description=draft.description,
                status=draft.status,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task
            return task.id

    def get(self, task_id: int) -> Task:
        with self._lock.read():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy()

    def update(self, task: Task) -> None:
        with self._lock.write():
            existing = self._tasks.get(task.id)
            if existing is None:
                raise TaskNotFoundError(task.id)
            self._tasks[task.id] = existing.model_copy(update={
                "title": task.title,
                "description": task.description,
                "status": task.status,
                "updated_at": self._now(),
            })

    def delete(self, task_id: int) -> None:
        with self._lock.write():
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]

    def list(self, flt: ListFilter) -> Tuple[List[Task], int]:
        with self._lock.read():
            # dict order is insertion order, i.e. ascending id
            matched = [
                t.model_copy() for t in self._tasks.values()
                if flt.status is None or t.status == flt.status
            ]
        total = len(matched)
        start = min(max(flt.offset, 0), total)
        end = min(max(start + flt.limit, start), total)
        return matched[start:end], total
