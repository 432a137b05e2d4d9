from typing import Any

from pydantic import BaseModel

from schemas.project_schema import ProgressResponse, ProjectResponse
from schemas.task_schema import TaskTreeNode


class SharedProjectResponse(BaseModel):
    """Everything a share link shows. Nothing here is writable through the link."""
    project: ProjectResponse
    tasks: list[TaskTreeNode]
    sections: dict[str, list[dict[str, Any]]]
    progress: ProgressResponse
    read_only: bool = True
