"""
Parcel Pydantic schemas.

Defines the values passed into and returned from the parcel store.
"""

import enum

from pydantic import BaseModel, Field, field_validator


class ParcelCreate(BaseModel):
    """
    Schema for adding a parcel.

    Contents are not validated beyond their types: blank addresses,
    negative client ids and unknown statuses are accepted as-is.
    """
    client: int = Field(..., description="Owning client identifier")
    status: str = Field(..., description="Delivery status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(..., description="Creation timestamp, ISO-8601 recommended")

    @field_validator("status", mode="before")
    @classmethod
    def status_value(cls, value):
        # ParcelStatus members are stored as their plain string value
        if isinstance(value, enum.Enum):
            return value.value
        return value


class ParcelRead(ParcelCreate):
    """Schema for a stored parcel."""
    number: int

    class Config:
        from_attributes = True
