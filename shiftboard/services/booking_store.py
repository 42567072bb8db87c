"""In-memory booking store."""

from __future__ import annotations

import logging
from dataclasses import replace

from shiftboard.core.exceptions import NotFoundError
from shiftboard.domain.booking_state import can_booking_transition
from shiftboard.models.booking import Booking, BookingStatus
from shiftboard.utils.identifiers import BOOKING_PREFIX, generate_id

logger = logging.getLogger(__name__)


class BookingStore:
    """Bookings kept newest first. Bookings are never deleted.

    Bookings are immutable; transitions swap in an updated copy.
    """

    def __init__(self, id_length: int = 6) -> None:
        self.id_length = id_length
        self._bookings: list[Booking] = []

    def __len__(self) -> int:
        return len(self._bookings)

    def exists(self, booking_id: str) -> bool:
        return any(b.id == booking_id for b in self._bookings)

    def get(self, booking_id: str) -> Booking:
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking
        raise NotFoundError("Booking", booking_id)

    def list(self, status: str | None = None, block_id: str | None = None) -> list[Booking]:
        bookings = list(self._bookings)
        if status is not None:
            bookings = [b for b in bookings if b.status == status]
        if block_id is not None:
            bookings = [b for b in bookings if b.block_id == block_id]
        return bookings

    def create(self, block_id: str, employee_name: str, employee_email: str) -> Booking:
        """Store a new pending booking in front. Admission is the caller's job."""
        booking = Booking(
            id=generate_id(BOOKING_PREFIX, self.id_length, exists=self.exists),
            block_id=block_id,
            employee_name=employee_name,
            employee_email=employee_email,
            status=BookingStatus.PENDING,
        )
        self._bookings.insert(0, booking)
        logger.info(f"Booking requested: {booking.id} on block {block_id} by {employee_email}")
        return booking

    def approve(self, booking_id: str) -> Booking:
        """pending → approved. Any other status is left alone."""
        booking = self.get(booking_id)
        if not can_booking_transition(booking.status, BookingStatus.APPROVED):
            logger.debug(f"Booking {booking_id} is {booking.status.value}, approve ignored")
            return booking

        updated = self._swap(booking, BookingStatus.APPROVED)
        logger.info(f"Booking {booking_id}: pending → approved")
        return updated

    def cancel(self, booking_id: str) -> Booking:
        """pending/approved → cancelled. Idempotent."""
        booking = self.get(booking_id)
        if not can_booking_transition(booking.status, BookingStatus.CANCELLED):
            logger.debug(f"Booking {booking_id} already cancelled")
            return booking

        updated = self._swap(booking, BookingStatus.CANCELLED)
        logger.info(f"Booking {booking_id}: {booking.status.value} → cancelled")
        return updated

    def _swap(self, booking: Booking, status: BookingStatus) -> Booking:
        updated = replace(booking, status=status)
        self._bookings[self._bookings.index(booking)] = updated
        return updated
