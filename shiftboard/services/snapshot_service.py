"""Read-only panel snapshots built from the scheduling state."""

from shiftboard.domain.admission import approved_count, is_full, pending_count
from shiftboard.models.block import BlockStatus
from shiftboard.schemas.views import (
    AdminBlockView,
    AdminBookingView,
    AdminViewResponse,
    StaffBlockView,
    StaffViewResponse,
)
from shiftboard.services.scheduling_service import SchedulingService
from shiftboard.utils.time_format import format_datetime, format_range


def build_admin_view(service: SchedulingService, timezone: str | None = None) -> AdminViewResponse:
    """All blocks, newest first, each with its bookings."""
    timezone = timezone or service.display_timezone
    blocks = service.list_blocks()
    index = service.bookings_by_block()

    cards = []
    for block in blocks:
        bookings = index.get(block.id, [])
        cards.append(
            AdminBlockView(
                id=block.id,
                title=block.title,
                location=block.location,
                starts_at=block.starts_at,
                ends_at=block.ends_at,
                time_range=format_range(block.starts_at, block.ends_at, timezone),
                capacity=block.capacity,
                status=block.status,
                notes=block.notes,
                approved_count=approved_count(block, bookings),
                pending_count=pending_count(block, bookings),
                bookings=[
                    AdminBookingView(
                        id=b.id,
                        block_id=b.block_id,
                        employee_name=b.employee_name,
                        employee_email=b.employee_email,
                        status=b.status,
                        booked_at=b.booked_at,
                        booked_at_display=format_datetime(b.booked_at, timezone),
                    )
                    for b in bookings
                ],
            )
        )

    return AdminViewResponse(location=service.location, blocks=cards)


def build_staff_view(service: SchedulingService, timezone: str | None = None) -> StaffViewResponse:
    """Open blocks with their approved/pending counts and fullness."""
    timezone = timezone or service.display_timezone
    blocks = service.list_blocks(status=BlockStatus.OPEN.value)
    index = service.bookings_by_block()

    cards = []
    for block in blocks:
        bookings = index.get(block.id, [])
        cards.append(
            StaffBlockView(
                id=block.id,
                title=block.title,
                location=block.location,
                starts_at=block.starts_at,
                ends_at=block.ends_at,
                time_range=format_range(block.starts_at, block.ends_at, timezone),
                capacity=block.capacity,
                notes=block.notes,
                approved_count=approved_count(block, bookings),
                pending_count=pending_count(block, bookings),
                is_full=is_full(block, bookings),
            )
        )

    return StaffViewResponse(location=service.location, blocks=cards)
