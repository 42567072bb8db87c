"""Pydantic schemas for API validation."""

from shiftboard.schemas.block import BlockCreate, BlockResponse
from shiftboard.schemas.booking import BookingCreate, BookingResponse
from shiftboard.schemas.views import (
    AdminBlockView,
    AdminBookingView,
    AdminViewResponse,
    StaffBlockView,
    StaffViewResponse,
)

__all__ = [
    # Block
    "BlockCreate",
    "BlockResponse",
    # Booking
    "BookingCreate",
    "BookingResponse",
    # Views
    "AdminBlockView",
    "AdminBookingView",
    "AdminViewResponse",
    "StaffBlockView",
    "StaffViewResponse",
]
