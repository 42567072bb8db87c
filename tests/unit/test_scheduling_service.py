from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError
from datetime import UTC, datetime

import pytest

from shiftboard.config import Settings
from shiftboard.core.exceptions import (
    BlockNotOpen,
    CapacityExceeded,
    DuplicateBooking,
    NotFoundError,
    ValidationError,
)
from shiftboard.domain.admission import approved_count
from shiftboard.models.block import BlockStatus
from shiftboard.models.booking import BookingStatus
from shiftboard.services.scheduling_service import SchedulingService

START = datetime(2026, 10, 18, 7, 15)
END = datetime(2026, 10, 18, 11, 15)


def store_state(service):
    return [(b.id, b.status) for b in service.list_bookings()]


def test_from_settings():
    service = SchedulingService.from_settings(
        Settings(location="Duisburg", enforce_capacity=True, id_suffix_length=8, display_timezone="UTC")
    )

    block = service.create_block("Früh", START, END)

    assert service.enforce_capacity
    assert service.display_timezone == "UTC"
    assert block.location == "Duisburg"
    assert len(block.id) == 9


def test_request_creates_pending_booking(service, block):
    booking = service.request_booking(block.id, "Anna", "a@x.com")

    assert booking.status == BookingStatus.PENDING
    assert booking.block_id == block.id
    assert service.list_bookings() == [booking]


def test_lax_capacity_allows_approving_past_capacity(service, block):
    first = service.request_booking(block.id, "Anna", "a@x.com")
    second = service.request_booking(block.id, "Ben", "b@x.com")

    first = service.approve_booking(first.id)
    second = service.approve_booking(second.id)

    assert first.status == BookingStatus.APPROVED
    assert second.status == BookingStatus.APPROVED
    assert approved_count(block, service.list_bookings()) == 2


def test_duplicate_request_rejected_and_store_unchanged(service, block):
    service.request_booking(block.id, "Anna", "a@x.com")
    before = store_state(service)

    with pytest.raises(DuplicateBooking):
        service.request_booking(block.id, "Anna again", "a@x.com")

    assert store_state(service) == before


def test_same_employee_may_book_again_after_cancellation(service, block):
    first = service.request_booking(block.id, "Anna", "a@x.com")
    service.cancel_booking(first.id)

    second = service.request_booking(block.id, "Anna", "a@x.com")

    assert second.status == BookingStatus.PENDING
    assert second.id != first.id


def test_same_employee_may_book_other_blocks(service, block):
    other = service.create_block("Spät", START.replace(hour=14), END.replace(hour=18))
    service.request_booking(block.id, "Anna", "a@x.com")

    booking = service.request_booking(other.id, "Anna", "a@x.com")

    assert booking.block_id == other.id


def test_closed_block_rejects_requests_until_reopened(service, block):
    service.close_block(block.id)

    with pytest.raises(BlockNotOpen):
        service.request_booking(block.id, "Anna", "a@x.com")
    assert service.list_bookings() == []

    service.reopen_block(block.id)
    assert service.request_booking(block.id, "Anna", "a@x.com").status == BookingStatus.PENDING


def test_cancelled_block_keeps_bookings_and_rejects_requests(service, block):
    booking = service.request_booking(block.id, "Anna", "a@x.com")

    service.cancel_block(block.id)

    assert service.get_block(block.id).status == BlockStatus.CANCELLED
    assert service.get_booking(booking.id).status == BookingStatus.PENDING
    with pytest.raises(BlockNotOpen):
        service.request_booking(block.id, "Ben", "b@x.com")


@pytest.mark.parametrize("name,email", [("", "a@x.com"), ("Anna", ""), ("  ", "a@x.com"), (None, None)])
def test_request_requires_name_and_email(service, block, name, email):
    with pytest.raises(ValidationError):
        service.request_booking(block.id, name, email)
    assert service.list_bookings() == []


def test_unknown_ids_raise_not_found(service):
    with pytest.raises(NotFoundError):
        service.request_booking("bmissing", "Anna", "a@x.com")
    with pytest.raises(NotFoundError):
        service.approve_booking("bkmissing")
    with pytest.raises(NotFoundError):
        service.cancel_booking("bkmissing")
    with pytest.raises(NotFoundError):
        service.reopen_block("bmissing")


def test_close_and_cancel_are_idempotent(service, block):
    booking = service.request_booking(block.id, "Anna", "a@x.com")
    service.close_block(block.id)
    service.cancel_booking(booking.id)

    block = service.close_block(block.id)
    cancelled = service.cancel_booking(booking.id)

    assert block.status == BlockStatus.CLOSED
    assert block.capacity == 1
    assert cancelled.status == BookingStatus.CANCELLED
    assert cancelled.booked_at == booking.booked_at


def test_walkthrough_with_lax_capacity(service):
    b1 = service.create_block("B1", START, END, capacity=1)
    assert b1.status == BlockStatus.OPEN

    booking1 = service.request_booking(b1.id, "A", "a@x.com")
    assert booking1.status == BookingStatus.PENDING

    booking1 = service.approve_booking(booking1.id)
    assert booking1.status == BookingStatus.APPROVED

    with pytest.raises(DuplicateBooking):
        service.request_booking(b1.id, "A", "a@x.com")

    booking2 = service.request_booking(b1.id, "B", "b@x.com")
    assert booking2.status == BookingStatus.PENDING

    booking1 = service.cancel_booking(booking1.id)

    b1 = service.get_block(b1.id)
    assert b1.status == BlockStatus.OPEN
    assert b1.capacity == 1
    assert booking1.status == BookingStatus.CANCELLED
    assert booking2.status == BookingStatus.PENDING
    assert service.list_bookings() == [booking2, booking1]


def test_enforced_capacity_rejects_second_approval(strict_service):
    block = strict_service.create_block("B1", START, END, capacity=1)
    first = strict_service.request_booking(block.id, "A", "a@x.com")
    second = strict_service.request_booking(block.id, "B", "b@x.com")

    strict_service.approve_booking(first.id)
    with pytest.raises(CapacityExceeded):
        strict_service.approve_booking(second.id)

    assert strict_service.get_booking(second.id).status == BookingStatus.PENDING


def test_enforced_capacity_rejects_requests_on_full_block(strict_service):
    block = strict_service.create_block("B1", START, END, capacity=1)
    first = strict_service.request_booking(block.id, "A", "a@x.com")
    strict_service.approve_booking(first.id)

    with pytest.raises(CapacityExceeded):
        strict_service.request_booking(block.id, "B", "b@x.com")

    # Revoking frees the seat again
    strict_service.cancel_booking(first.id)
    assert strict_service.request_booking(block.id, "B", "b@x.com").status == BookingStatus.PENDING


def test_concurrent_duplicate_requests_admit_one(service, block):
    def attempt(_):
        try:
            service.request_booking(block.id, "Anna", "a@x.com")
            return True
        except DuplicateBooking:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(32)))

    assert results.count(True) == 1
    assert len(service.list_bookings()) == 1


def test_returned_entities_cannot_change_the_store(service, block):
    booking = service.request_booking(block.id, "Anna", "a@x.com")

    with pytest.raises(FrozenInstanceError):
        service.list_bookings()[0].status = BookingStatus.APPROVED
    with pytest.raises(FrozenInstanceError):
        service.get_block(block.id).capacity = 0
    with pytest.raises(FrozenInstanceError):
        service.bookings_by_block()[block.id][0].status = BookingStatus.CANCELLED

    assert service.get_booking(booking.id).status == BookingStatus.PENDING
    assert service.get_block(block.id).capacity == 1


def test_earlier_reads_keep_their_state(service, block):
    booking = service.request_booking(block.id, "Anna", "a@x.com")
    listed = service.list_bookings()

    service.approve_booking(booking.id)
    service.close_block(block.id)

    assert listed[0].status == BookingStatus.PENDING
    assert block.status == BlockStatus.OPEN
    assert service.get_booking(booking.id).status == BookingStatus.APPROVED
    assert service.get_block(block.id).status == BlockStatus.CLOSED


def test_aware_block_times_use_the_service_timezone():
    service = SchedulingService(display_timezone="UTC")

    block = service.create_block(
        "Früh", datetime(2026, 10, 18, 5, 15, tzinfo=UTC), datetime(2026, 10, 18, 9, 15, tzinfo=UTC)
    )

    assert block.starts_at == datetime(2026, 10, 18, 5, 15)
    assert block.ends_at == datetime(2026, 10, 18, 9, 15)
