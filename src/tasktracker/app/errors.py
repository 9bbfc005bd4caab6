from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.domain.errors import TaskError, TaskNotFoundError, TaskValidationError

logger = logging.getLogger("tasktracker.system")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    err = errors[0]
    loc = [str(p) for p in err.get("loc", ()) if p != "body"]
    if err.get("type") == "json_invalid" or not loc:
        return "invalid json"
    field = loc[-1]
    if err.get("type") == "missing":
        return f"{field} required"
    ctx_error = (err.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    if err.get("type") == "enum":
        return f"invalid {field}"
    return f"{field}: {err.get('msg', 'invalid value')}"


def install_error_handlers(app: FastAPI) -> None:
    """Route every failure to a `{"error": ...}` body with the right status."""

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        return error_response(400, _describe(exc))

    @app.exception_handler(TaskValidationError)
    async def _invalid_task(request: Request, exc: TaskValidationError):
        return error_response(400, str(exc))

    @app.exception_handler(TaskNotFoundError)
    async def _not_found(request: Request, exc: TaskNotFoundError):
        return error_response(404, "task not found")

    @app.exception_handler(TaskError)
    async def _task_failure(request: Request, exc: TaskError):
        logger.error("task.failure", extra={"category": "tasks", "event": "task.failure", "error": str(exc)})
        return error_response(500, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        return error_response(500, str(exc))
