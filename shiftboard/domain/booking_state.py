"""Booking state machine.

Booking changes that the table does not allow are ignored by the booking
store rather than raised: approving a cancelled booking or cancelling it
again leaves it as it is.
"""

BOOKING_TRANSITIONS = {
    "pending": {"approved", "cancelled"},
    "approved": {"cancelled"},  # revocation
    "cancelled": set(),
}


def can_booking_transition(current: str, target: str) -> bool:
    # Status enums hash by member name, so look up the plain value
    current = getattr(current, "value", current)
    target = getattr(target, "value", target)
    return target in BOOKING_TRANSITIONS.get(current, set())
