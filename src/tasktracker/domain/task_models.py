from __future__ import annotations
from dataclasses import dataclass
from pydantic import BaseModel, field_validator
from enum import Enum
from datetime import datetime
from typing import List, Optional

class TaskStatus(str, Enum):
    pending = "Pending"
    in_progress = "InProgress"
    completed = "Completed"
    cancelled = "Cancelled"

class TaskDraft(BaseModel):
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.pending

class Task(TaskDraft):
    id: int
    created_at: datetime
    updated_at: datetime

@dataclass
class ListFilter:
    status: Optional[TaskStatus] = None
    offset: int = 0
    limit: int = 10


# --- wire payloads ---

def _require_title(v: Optional[str]) -> Optional[str]:
    if v is not None and not v.strip():
        raise ValueError("title cannot be empty")
    return v

class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _require_title(v)

class TaskUpdate(BaseModel):
    """
    Partial update. A field that is absent or null is left unchanged;
    any other value replaces the stored one.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _require_title(v)

class TaskList(BaseModel):
    total: int
    page: int
    size: int
    pages: int
    tasks: List[Task]
