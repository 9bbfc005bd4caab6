import math
import re
from typing import Callable, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from tasktracker.domain.task_models import Task, TaskCreate, TaskList, TaskStatus, TaskUpdate
from tasktracker.services.task_service import DEFAULT_PAGE_SIZE, TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])

MAX_PAGE_SIZE = 100

_TASK_ID = re.compile(r"[0-9]+")

M = TypeVar("M", bound=BaseModel)


def get_service(request: Request) -> TaskService:
    # Set by create_app()
    return request.app.state.task_service


def json_body(model: Type[M]) -> Callable:
    """
    Decode the request body as JSON whatever its Content-Type says.
    """
    async def parse(request: Request):
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False), body=raw)
    return parse


def _positive_int(raw: Optional[str], default: int) -> int:
    try:
        n = int(raw) if raw is not None else default
    except ValueError:
        return default
    return n if n > 0 else default


def _task_id(raw: str) -> int:
    # ids are plain ASCII decimal integers; anything else names no task
    if not _TASK_ID.fullmatch(raw):
        raise HTTPException(status_code=404, detail="task not found")
    try:
        return int(raw)
    except ValueError:
        # longer than the interpreter's int conversion limit
        raise HTTPException(status_code=404, detail="task not found")


@router.post("", response_model=Task, response_model_exclude_none=True, status_code=201)
def create_task(payload: TaskCreate = Depends(json_body(TaskCreate)), svc: TaskService = Depends(get_service)):
    return svc.create_task(payload.title, payload.description)


@router.get("", response_model=TaskList, response_model_exclude_none=True)
def list_tasks(
    page: Optional[str] = None,
    size: Optional[str] = None,
    status: Optional[str] = None,
    svc: TaskService = Depends(get_service),
):
    page_n = _positive_int(page, 1)
    size_n = min(_positive_int(size, DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)

    status_filter = None
    if status is not None and status.strip():
        try:
            status_filter = TaskStatus(status.strip())
        except ValueError:
            raise HTTPException(status_code=400, detail="invalid status filter")

    tasks, total = svc.list_tasks(page_n, size_n, status_filter)
    return TaskList(
        total=total,
        page=page_n,
        size=size_n,
        pages=math.ceil(total / size_n),
        tasks=tasks,
    )


@router.get("/{task_id}", response_model=Task, response_model_exclude_none=True)
def get_task(task_id: str, svc: TaskService = Depends(get_service)):
    return svc.get_task(_task_id(task_id))


@router.put("/{task_id}", response_model=Task, response_model_exclude_none=True)
def update_task(task_id: str, payload: TaskUpdate = Depends(json_body(TaskUpdate)), svc: TaskService = Depends(get_service)):
    return svc.update_task(
        _task_id(task_id),
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )


@router.delete("/{task_id}", status_code=204, response_class=Response)
def delete_task(task_id: str, svc: TaskService = Depends(get_service)):
    svc.delete_task(_task_id(task_id))
    return Response(status_code=204)
