"""
Pydantic schemas for Category responses.
"""
from pydantic import BaseModel


class CategoryResponse(BaseModel):
    """Response model for category data."""

    id: int
    name: str
    description: str

    model_config = {"from_attributes": True}
