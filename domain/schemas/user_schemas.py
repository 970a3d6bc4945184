from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user"""

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Contact email")
