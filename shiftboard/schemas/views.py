"""Panel snapshots handed to the admin and staff views."""

from datetime import datetime

from pydantic import BaseModel

from shiftboard.models.block import BlockStatus
from shiftboard.schemas.booking import BookingResponse


class AdminBookingView(BookingResponse):
    """Booking row in the admin panel."""

    booked_at_display: str


class AdminBlockView(BaseModel):
    """Block card in the admin panel with all of its bookings."""

    id: str
    title: str
    location: str
    starts_at: datetime
    ends_at: datetime
    time_range: str
    capacity: int
    status: BlockStatus
    notes: str | None
    approved_count: int
    pending_count: int
    bookings: list[AdminBookingView]


class AdminViewResponse(BaseModel):
    location: str
    blocks: list[AdminBlockView]


class StaffBlockView(BaseModel):
    """Open block as offered to staff."""

    id: str
    title: str
    location: str
    starts_at: datetime
    ends_at: datetime
    time_range: str
    capacity: int
    notes: str | None
    approved_count: int
    pending_count: int
    # Booking button is disabled when true
    is_full: bool


class StaffViewResponse(BaseModel):
    location: str
    blocks: list[StaffBlockView]
