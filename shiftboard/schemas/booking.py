"""Booking-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shiftboard.models.booking import BookingStatus


class BookingCreate(BaseModel):
    """Schema for a staff booking request."""

    block_id: str = Field(..., min_length=1, max_length=64)
    employee_name: str = Field(default="", max_length=200)
    # Deduplication key only, not verified
    employee_email: str = Field(default="", max_length=320)


class BookingResponse(BaseModel):
    """Schema for booking response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    block_id: str
    employee_name: str
    employee_email: str
    status: BookingStatus
    booked_at: datetime
