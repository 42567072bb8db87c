"""Scheduling service: the one entry point for block and booking changes.

Owns the block store and the booking store, runs admission for new
requests and guards every mutation with a single lock, so the duplicate
check and the insert of a booking request happen as one step even when the
HTTP layer serves requests concurrently.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any

from shiftboard.config import Settings
from shiftboard.core.exceptions import (
    BlockNotOpen,
    CapacityExceeded,
    DuplicateBooking,
    ValidationError,
)
from shiftboard.domain.admission import (
    REASON_BLOCK_NOT_OPEN,
    REASON_DUPLICATE,
    REASON_FULL,
    can_approve_booking,
    can_request_booking,
)
from shiftboard.models.block import Block
from shiftboard.models.booking import Booking
from shiftboard.services.block_store import BlockStore
from shiftboard.services.booking_index import index_by_block
from shiftboard.services.booking_store import BookingStore
from shiftboard.utils.time_format import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


class SchedulingService:
    """In-memory scheduling state for one location.

    Reads return the stored entities, which are frozen, so callers get
    snapshots and every change goes through the methods below.
    """

    def __init__(
        self,
        location: str = "Duisburg",
        enforce_capacity: bool = False,
        id_length: int = 6,
        display_timezone: str = DEFAULT_TIMEZONE,
    ) -> None:
        self.location = location
        self.enforce_capacity = enforce_capacity
        self.display_timezone = display_timezone
        self.blocks = BlockStore(location, id_length=id_length, timezone=display_timezone)
        self.bookings = BookingStore(id_length=id_length)
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SchedulingService":
        return cls(
            location=settings.location,
            enforce_capacity=settings.enforce_capacity,
            id_length=settings.id_suffix_length,
            display_timezone=settings.display_timezone,
        )

    # ============ BLOCKS ============

    def create_block(
        self,
        title: str | None,
        starts_at: datetime | str | None,
        ends_at: datetime | str | None,
        capacity: Any = 1,
        notes: str | None = None,
    ) -> Block:
        with self._lock:
            return self.blocks.create(title, starts_at, ends_at, capacity=capacity, notes=notes)

    def get_block(self, block_id: str) -> Block:
        with self._lock:
            return self.blocks.get(block_id)

    def list_blocks(self, status: str | None = None) -> list[Block]:
        with self._lock:
            return self.blocks.list(status=status)

    def close_block(self, block_id: str) -> Block:
        with self._lock:
            return self.blocks.close(block_id)

    def reopen_block(self, block_id: str) -> Block:
        with self._lock:
            return self.blocks.reopen(block_id)

    def cancel_block(self, block_id: str) -> Block:
        """Retire a block for good. Its bookings keep their status."""
        with self._lock:
            return self.blocks.cancel(block_id)

    # ============ BOOKINGS ============

    def request_booking(self, block_id: str, employee_name: str | None, employee_email: str | None) -> Booking:
        """File a pending booking for an employee.

        Args:
            block_id: Target block
            employee_name: Requester's display name
            employee_email: Requester's email, used as deduplication key only

        Returns:
            Booking: The new pending booking

        Raises:
            NotFoundError: Unknown block
            ValidationError: Missing name or email
            BlockNotOpen: Block is closed or cancelled
            DuplicateBooking: Employee already holds a pending/approved booking
            CapacityExceeded: Block is full (only with enforce_capacity)
        """
        name = (employee_name or "").strip()
        email = (employee_email or "").strip()

        with self._lock:
            block = self.blocks.get(block_id)

            if not name:
                raise ValidationError("employee_name is required")
            if not email:
                raise ValidationError("employee_email is required")

            accepted, reason = can_request_booking(
                block, email, self.bookings.list(block_id=block.id), enforce_capacity=self.enforce_capacity
            )
            if not accepted:
                logger.warning(f"Booking request on block {block.id} by {email} rejected: {reason}")
                if reason == REASON_BLOCK_NOT_OPEN:
                    raise BlockNotOpen()
                if reason == REASON_DUPLICATE:
                    raise DuplicateBooking()
                if reason == REASON_FULL:
                    raise CapacityExceeded()

            return self.bookings.create(block.id, name, email)

    def get_booking(self, booking_id: str) -> Booking:
        with self._lock:
            return self.bookings.get(booking_id)

    def list_bookings(self, status: str | None = None, block_id: str | None = None) -> list[Booking]:
        with self._lock:
            return self.bookings.list(status=status, block_id=block_id)

    def approve_booking(self, booking_id: str) -> Booking:
        """Approve a pending booking.

        Without capacity enforcement the block's capacity is not re-checked,
        so an admin can approve past it.
        """
        with self._lock:
            booking = self.bookings.get(booking_id)
            block = self.blocks.find(booking.block_id)

            accepted, _ = can_approve_booking(
                booking,
                block,
                self.bookings.list(block_id=booking.block_id),
                enforce_capacity=self.enforce_capacity,
            )
            if not accepted:
                logger.warning(f"Approval of booking {booking_id} rejected: block {booking.block_id} is full")
                raise CapacityExceeded()

            return self.bookings.approve(booking_id)

    def cancel_booking(self, booking_id: str) -> Booking:
        with self._lock:
            return self.bookings.cancel(booking_id)

    # ============ INDEX ============

    def bookings_by_block(self) -> dict[str, list[Booking]]:
        """Bookings grouped by block id, from the current store snapshot."""
        with self._lock:
            return index_by_block(self.bookings.list())
