"""In-memory domain entities."""

from shiftboard.models.block import Block, BlockStatus
from shiftboard.models.booking import ACTIVE_BOOKING_STATUSES, Booking, BookingStatus

__all__ = [
    "ACTIVE_BOOKING_STATUSES",
    "Block",
    "BlockStatus",
    "Booking",
    "BookingStatus",
]
