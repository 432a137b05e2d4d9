from datetime import date, datetime
from pydantic import BaseModel, Field

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class ScheduleCellUpsert(BaseModel):
    project_id: str
    date: date
    content: str = ""
    background_color: str | None = Field(default=None, pattern=HEX_COLOR)
    text_color: str | None = Field(default=None, pattern=HEX_COLOR)


class ScheduleCellResponse(BaseModel):
    id: str
    project_id: str
    date: date
    content: str
    background_color: str
    text_color: str
    updated_at: datetime | None = None


class ScheduleProjectRow(BaseModel):
    """One row of the schedule grid."""
    id: str
    name: str
    status: str
    brand_type: str
    brand_name: str | None = None
    creator_name: str | None = None
