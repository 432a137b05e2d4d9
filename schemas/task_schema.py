from __future__ import annotations

from datetime import date, datetime
from pydantic import BaseModel, Field

from models.task import TaskStatus


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    status: TaskStatus = TaskStatus.NOT_STARTED
    due_date: date | None = None
    parent_id: str | None = None


class TaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None
    due_date: date | None = None


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskResponse(BaseModel):
    id: str
    project_id: str
    parent_id: str | None = None
    title: str
    description: str
    status: TaskStatus
    due_date: date | None = None
    order_index: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskTreeNode(TaskResponse):
    children: list[TaskTreeNode] = []


class SubtaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    completed: bool = False


class SubtaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    completed: bool | None = None


class SubtaskResponse(BaseModel):
    id: str
    task_id: str
    title: str
    completed: bool
    created_at: datetime | None = None


class TaskNoteCreate(BaseModel):
    content: str


class TaskNoteResponse(BaseModel):
    id: str
    task_id: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

TaskTreeNode.model_rebuild()
