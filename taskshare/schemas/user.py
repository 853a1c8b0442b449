"""User API schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public user profile."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
