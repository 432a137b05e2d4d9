from datetime import datetime
from pydantic import BaseModel, Field


class BrandCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    theme: str = ""
    features: str = ""


class BrandUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    theme: str | None = None
    features: str | None = None


class BrandResponse(BaseModel):
    id: str
    name: str
    theme: str
    features: str
    project_ids: list[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BrandProjectLink(BaseModel):
    brand_id: str
    project_id: str


class CreatorCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class CreatorResponse(BaseModel):
    id: str
    name: str
    brand_ids: list[str] = []
    created_at: datetime | None = None


class CreatorBrandLink(BaseModel):
    creator_id: str
    brand_id: str
