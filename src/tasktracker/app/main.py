from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI

from tasktracker.app.errors import install_error_handlers
from tasktracker.app.middleware.access_log import AccessLogMiddleware
from tasktracker.app.routes import tasks
from tasktracker.app.seed import seed
from tasktracker.config import Settings
from tasktracker.domain.task_repo import TaskRepo
from tasktracker.infra.db.task_repo_memory import InMemoryTaskRepo
from tasktracker.observability.logging import setup_logging
from tasktracker.services.task_service import TaskService

logger = logging.getLogger("tasktracker.system")


def create_app(settings: Optional[Settings] = None, repo: Optional[TaskRepo] = None) -> FastAPI:
    """
    Build an isolated application: each call gets its own repository and
    service unless a repository is passed in.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_dir)
    logger.info("system.start", extra={"category": "system", "event": "system.start"})

    app = FastAPI(title="Task Tracker")
    app.add_middleware(AccessLogMiddleware)
    install_error_handlers(app)

    # --- storage wiring ---
    if repo is None:
        repo = InMemoryTaskRepo()
    if settings.seed_data:
        seed(repo)
    app.state.settings = settings
    app.state.task_service = TaskService(repo)

    app.include_router(tasks.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def run() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    logger.info(
        "system.listen",
        extra={"category": "system", "event": "system.listen", "host": settings.host, "port": settings.port},
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
