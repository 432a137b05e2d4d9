from datetime import datetime
from pydantic import BaseModel, Field

from models.project import BrandType, ProjectStatus


class ProjectBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    brand_type: BrandType = BrandType.BRAND_A


class ProjectCreate(ProjectBase):
    """Client payload for creating a project. Owner is inferred from auth."""
    status: ProjectStatus = ProjectStatus.IN_PROGRESS


class ProjectUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: ProjectStatus | None = None
    brand_type: BrandType | None = None


class ProjectResponse(ProjectBase):
    id: str
    user_id: str
    status: ProjectStatus
    is_shared: bool = False
    share_token: str | None = None
    shared_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProgressResponse(BaseModel):
    total: int
    completed: int
    percent: int


class ProjectWithProgress(ProjectResponse):
    progress: ProgressResponse
    brand_name: str | None = None
    creator_name: str | None = None


class BrandCountsResponse(BaseModel):
    brand_a: int = 0
    brand_b: int = 0


class ShareResponse(BaseModel):
    is_shared: bool
    share_token: str | None = None
    shared_at: datetime | None = None
    share_url: str | None = None


class DuplicateResponse(BaseModel):
    project: ProjectResponse
    status: str
    message: str
    copied: dict[str, int] = {}
    errors: list[str] = []
    failed_sections: list[str] = []
