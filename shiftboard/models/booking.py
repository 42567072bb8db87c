"""Booking entity: a staff request against one block."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class BookingStatus(str, Enum):
    """Booking lifecycle states."""

    PENDING = "pending"
    APPROVED = "approved"
    CANCELLED = "cancelled"


# Statuses that hold (or wait for) a seat on the block
ACTIVE_BOOKING_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.APPROVED})


@dataclass(frozen=True)
class Booking:
    """Staff request to occupy one unit of a block's capacity.

    ``block_id`` is a lookup key, not ownership: the block may be closed
    independently of its bookings.
    """

    id: str
    block_id: str
    employee_name: str
    employee_email: str
    status: BookingStatus = BookingStatus.PENDING
    booked_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_BOOKING_STATUSES
