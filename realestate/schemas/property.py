"""Property Pydantic schemas for request/response validation."""

from datetime import date

from pydantic import BaseModel, Field


class PropertyBase(BaseModel):
    """Base property schema."""

    title: str = Field(min_length=1, max_length=255)
    listing_number: str | None = Field(default=None, max_length=13)
    listing_date: date | None = None


class PropertyCreate(PropertyBase):
    """Schema for creating a new property. Omit the id to have one assigned."""

    property_id: int | None = None


class PropertyUpdate(BaseModel):
    """Schema for updating a property."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    listing_number: str | None = Field(default=None, max_length=13)
    listing_date: date | None = None


class PropertyResponse(PropertyBase):
    """Schema for property response."""

    property_id: int
    # Rows are read back as stored; engines that skip VARCHAR length checks
    # may hold longer listing numbers.
    listing_number: str | None = None

    model_config = {"from_attributes": True}
