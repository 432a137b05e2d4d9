"""Payloads for the project overview sections."""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class SectionRow(BaseModel):
    id: str
    project_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MoveRequest(BaseModel):
    direction: Literal["up", "down"]


# -- project notes -----------------------------------------------------------

class ProjectNoteCreate(BaseModel):
    content: str = ""


class ProjectNoteUpdate(BaseModel):
    content: str | None = None


class ProjectNoteResponse(SectionRow):
    content: str


# -- schedules ---------------------------------------------------------------

class ScheduleCreate(BaseModel):
    content: str = ""
    milestone: str = ""


class ScheduleUpdate(BaseModel):
    content: str | None = None
    milestone: str | None = None


class ScheduleResponse(SectionRow):
    content: str
    milestone: str
    order_index: int


# -- documents ---------------------------------------------------------------

class DocumentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    url: str = ""
    memo: str = ""


class DocumentUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = None
    memo: str | None = None


class DocumentResponse(SectionRow):
    name: str
    url: str
    memo: str


# -- meetings ----------------------------------------------------------------

class MeetingCreate(BaseModel):
    date: str = ""
    participants: str = ""
    summary: str = ""
    decisions: str = ""


class MeetingUpdate(BaseModel):
    date: str | None = None
    participants: str | None = None
    summary: str | None = None
    decisions: str | None = None


class MeetingResponse(SectionRow):
    date: str
    participants: str
    summary: str
    decisions: str
    order_index: int


# -- returns -----------------------------------------------------------------

ReturnStatus = Literal["draft", "confirmed"]


class ReturnCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    price_range: str = ""
    description: str = ""
    status: ReturnStatus = "draft"


class ReturnUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price_range: str | None = None
    description: str | None = None
    status: ReturnStatus | None = None


class ReturnResponse(SectionRow):
    name: str
    price_range: str
    description: str
    status: ReturnStatus
    order_index: int


# -- design requirements -----------------------------------------------------

class DesignRequirementCreate(BaseModel):
    design_tone: str = ""
    colors: str = ""
    fonts: str = ""
    ng_items: str = ""
    reference_urls: str = ""


class DesignRequirementUpdate(BaseModel):
    design_tone: str | None = None
    colors: str | None = None
    fonts: str | None = None
    ng_items: str | None = None
    reference_urls: str | None = None


class DesignRequirementResponse(SectionRow):
    design_tone: str
    colors: str
    fonts: str
    ng_items: str
    reference_urls: str
    order_index: int


# -- text content requirements -----------------------------------------------

class TextContentRequirementCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    url: str = ""
    memo: str = ""


class TextContentRequirementUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = None
    memo: str | None = None


class TextContentRequirementResponse(SectionRow):
    name: str
    url: str
    memo: str


# -- video requirements ------------------------------------------------------

class VideoRequirementCreate(BaseModel):
    video_type: str = ""
    duration: str = ""
    required_cuts: str = ""
    has_narration: bool = False
    reference_url: str = ""


class VideoRequirementUpdate(BaseModel):
    video_type: str | None = None
    duration: str | None = None
    required_cuts: str | None = None
    has_narration: bool | None = None
    reference_url: str | None = None


class VideoRequirementResponse(SectionRow):
    video_type: str
    duration: str
    required_cuts: str
    has_narration: bool
    reference_url: str


# -- image assets ------------------------------------------------------------

class ImageAssetCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    purpose: str = ""
    url: str = ""
    status: str = ""


class ImageAssetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    purpose: str | None = None
    url: str | None = None
    status: str | None = None


class ImageAssetResponse(SectionRow):
    name: str
    purpose: str
    url: str
    status: str
    order_index: int
