from datetime import date, datetime

from shiftboard.models.block import BlockStatus
from shiftboard.services.scheduling_service import SchedulingService
from shiftboard.services.seed import DEMO_BLOCKS, seed_demo_blocks
from shiftboard.services.snapshot_service import build_admin_view, build_staff_view


def test_seed_creates_demo_blocks_in_listed_order(service):
    created = seed_demo_blocks(service, day=date(2026, 10, 18))

    blocks = service.list_blocks()
    assert [b.title for b in blocks] == [title for title, *_ in DEMO_BLOCKS]
    assert [b.id for b in blocks] == [b.id for b in created]
    assert blocks[0].starts_at == datetime(2026, 10, 18, 7, 15)
    assert blocks[0].ends_at == datetime(2026, 10, 18, 11, 15)
    assert blocks[0].notes == "Eingang & Flur"
    assert all(b.capacity == 1 and b.status == BlockStatus.OPEN for b in blocks)


def test_staff_view_lists_open_blocks_with_counts(service, block):
    closed = service.create_block("Spät", datetime(2026, 10, 18, 14, 55), datetime(2026, 10, 18, 18, 55))
    service.close_block(closed.id)
    first = service.request_booking(block.id, "Anna", "a@x.com")
    service.request_booking(block.id, "Ben", "b@x.com")
    service.approve_booking(first.id)

    view = build_staff_view(service, timezone="Europe/Berlin")

    assert view.location == "Duisburg"
    assert [card.id for card in view.blocks] == [block.id]
    card = view.blocks[0]
    assert card.approved_count == 1
    assert card.pending_count == 1
    assert card.is_full
    assert card.time_range == "18.10.2026, 07:15 – 18.10.2026, 11:15"


def test_admin_view_shows_every_block_with_bookings(service, block):
    other = service.create_block("Spät", datetime(2026, 10, 18, 14, 55), datetime(2026, 10, 18, 18, 55))
    service.cancel_block(other.id)
    booking = service.request_booking(block.id, "Anna", "a@x.com")

    view = build_admin_view(service, timezone="Europe/Berlin")

    assert [card.id for card in view.blocks] == [other.id, block.id]
    assert view.blocks[0].status == BlockStatus.CANCELLED
    assert view.blocks[0].bookings == []
    rows = view.blocks[1].bookings
    assert [row.id for row in rows] == [booking.id]
    assert rows[0].booked_at_display
    assert view.blocks[1].pending_count == 1


def test_views_render_in_the_service_timezone():
    service = SchedulingService(display_timezone="UTC")
    block = service.create_block("Früh", datetime(2026, 10, 18, 7, 15), datetime(2026, 10, 18, 11, 15))
    booking = service.request_booking(block.id, "Anna", "a@x.com")

    card = build_admin_view(service).blocks[0]

    assert card.bookings[0].booked_at_display == booking.booked_at.strftime("%d.%m.%Y, %H:%M")
    assert card.time_range == "18.10.2026, 07:15 – 18.10.2026, 11:15"
