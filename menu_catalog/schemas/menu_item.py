"""
Pydantic schemas for MenuItem request/response validation.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class MenuItemCreate(BaseModel):
    """
    Payload for creating menu items.

    Required fields are optional here so that a missing name, price or
    category_id is reported by the service with a single message.
    """

    name: Optional[str] = Field(None, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=2000)
    category_id: Optional[int] = Field(None, ge=0)


class MenuItemUpdate(BaseModel):
    """
    Payload for partial updates.
    Only fields present in the request body (and not null) are applied.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=2000)
    category_id: Optional[int] = Field(None, gt=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        """Strip the name and reject one that is only whitespace."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v

    def provided_fields(self) -> dict:
        """Return the fields the client actually sent with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MenuItemFilters(BaseModel):
    """Optional list filters; combined with logical AND."""

    category_id: Optional[int] = None
    search: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    @field_validator("category_id", "search", "min_price", "max_price", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        """Treat empty query values as an absent filter."""
        if v == "":
            return None
        return v


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class MenuItemResponse(BaseModel):
    """Response model for menu item data."""

    id: int
    name: str
    price: float
    description: str
    category_id: int

    model_config = {"from_attributes": True}
