"""Admission rules for booking requests and approvals.

Pure functions over a block and the bookings filed against it. The
scheduling service calls these under its lock and turns a refusal into the
matching exception.

Capacity counts only ``approved`` bookings. Whether a full block refuses new
requests and approvals is decided by the caller (``enforce_capacity``);
without enforcement fullness is only reported to the staff panel.
"""

from collections.abc import Iterable

from shiftboard.models.block import Block, BlockStatus
from shiftboard.models.booking import Booking, BookingStatus

# Refusal reasons, mapped to exceptions by the scheduling service
REASON_BLOCK_NOT_OPEN = "block_not_open"
REASON_DUPLICATE = "duplicate_booking"
REASON_FULL = "capacity_exceeded"


def approved_count(block: Block, bookings: Iterable[Booking]) -> int:
    return sum(1 for b in bookings if b.block_id == block.id and b.status == BookingStatus.APPROVED)


def pending_count(block: Block, bookings: Iterable[Booking]) -> int:
    return sum(1 for b in bookings if b.block_id == block.id and b.status == BookingStatus.PENDING)


def is_full(block: Block, bookings: Iterable[Booking]) -> bool:
    """A block is full once approved bookings reach its capacity."""
    return approved_count(block, bookings) >= block.capacity


def find_active_booking(block: Block, employee_email: str, bookings: Iterable[Booking]) -> Booking | None:
    """Return the employee's pending/approved booking on this block, if any."""
    for booking in bookings:
        if booking.block_id == block.id and booking.employee_email == employee_email and booking.is_active:
            return booking
    return None


def can_request_booking(
    block: Block,
    employee_email: str,
    bookings: Iterable[Booking],
    enforce_capacity: bool = False,
) -> tuple[bool, str | None]:
    """Check if an employee may file a new request on a block.

    Args:
        block: Target block
        employee_email: Deduplication key of the requester
        bookings: Current bookings (any block)
        enforce_capacity: Refuse requests on full blocks

    Returns:
        Tuple of (accepted, refusal_reason)
    """
    bookings = list(bookings)

    if block.status != BlockStatus.OPEN:
        return False, REASON_BLOCK_NOT_OPEN

    if find_active_booking(block, employee_email, bookings) is not None:
        return False, REASON_DUPLICATE

    if enforce_capacity and is_full(block, bookings):
        return False, REASON_FULL

    return True, None


def can_approve_booking(
    booking: Booking,
    block: Block | None,
    bookings: Iterable[Booking],
    enforce_capacity: bool = False,
) -> tuple[bool, str | None]:
    """Check if approving a pending booking keeps the block within capacity.

    Non-pending bookings always pass: approving them is a no-op. A booking
    whose block no longer resolves cannot be checked and passes as well.
    """
    if not enforce_capacity or block is None or booking.status != BookingStatus.PENDING:
        return True, None

    if is_full(block, bookings):
        return False, REASON_FULL

    return True, None
