from pydantic import BaseModel


class PreferenceUpdate(BaseModel):
    is_expanded: bool


class PreferenceResponse(BaseModel):
    project_id: str
    section_name: str
    is_expanded: bool
