from pydantic import BaseModel


class UserResponse(BaseModel):
    id: str
    email: str
    name: str | None = None
    display_name: str

    model_config = {"from_attributes": True}
