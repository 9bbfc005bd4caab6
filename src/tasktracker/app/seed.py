from __future__ import annotations

import logging

from tasktracker.domain.task_models import TaskDraft, TaskStatus
from tasktracker.domain.task_repo import TaskRepo

logger = logging.getLogger("tasktracker.system")

SAMPLE_TASKS = (
    TaskDraft(title="Buy groceries", description="Milk, eggs, bread", status=TaskStatus.pending),
    TaskDraft(title="Deploy release", description="Deploy v1.2 to staging", status=TaskStatus.in_progress),
    TaskDraft(title="Retro meeting", description="Sprint retro", status=TaskStatus.completed),
)


def seed(repo: TaskRepo) -> None:
    for draft in SAMPLE_TASKS:
        repo.create(draft.model_copy())
    logger.info("seed.loaded", extra={"category": "system", "event": "seed.loaded", "count": len(SAMPLE_TASKS)})
