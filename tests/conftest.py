# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tasktracker.app.main import create_app
from tasktracker.config import Settings
from tasktracker.infra.db.task_repo_memory import InMemoryTaskRepo
from tasktracker.services.task_service import TaskService


class StepClock:
    """Deterministic clock: every call moves one second forward."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture()
def settings() -> Settings:
    # No log file in tests; console only
    return Settings(log_level="WARNING", log_dir=None)


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo(clock=StepClock())


@pytest.fixture()
def service(repo: InMemoryTaskRepo) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def client(settings: Settings, repo: InMemoryTaskRepo) -> TestClient:
    app = create_app(settings, repo=repo)
    with TestClient(app) as c:
        yield c
