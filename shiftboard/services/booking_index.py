"""Bookings grouped by block."""

from collections.abc import Iterable

from shiftboard.models.booking import Booking


def index_by_block(bookings: Iterable[Booking]) -> dict[str, list[Booking]]:
    """Group bookings under their block id.

    Order inside each group follows the input order. Built fresh from a
    snapshot on every call and never updated in place.
    """
    index: dict[str, list[Booking]] = {}
    for booking in bookings:
        index.setdefault(booking.block_id, []).append(booking)
    return index
