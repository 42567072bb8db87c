"""Demo blocks for a fresh process."""

import logging
from datetime import date, datetime, time

from shiftboard.models.block import Block
from shiftboard.services.scheduling_service import SchedulingService

logger = logging.getLogger(__name__)

# (title, start HH:MM, end HH:MM, notes)
DEMO_BLOCKS: list[tuple[str, str, str, str | None]] = [
    ("Früh – Objekt A", "07:15", "11:15", "Eingang & Flur"),
    ("Spät – Objekt B", "14:55", "18:55", None),
    ("Abend – Objekt C", "19:00", "21:00", None),
]


def at_time(day: date, hhmm: str) -> datetime:
    """Local wall-clock datetime for ``day`` at 'HH:MM'."""
    return datetime.combine(day, time.fromisoformat(hhmm))


def seed_demo_blocks(service: SchedulingService, day: date | None = None) -> list[Block]:
    """Create the demo blocks for ``day`` (today by default), capacity 1.

    They are created in reverse so the store lists them in the order above.
    """
    day = day or date.today()
    created = []
    for title, start, end, notes in reversed(DEMO_BLOCKS):
        created.append(
            service.create_block(title, at_time(day, start), at_time(day, end), capacity=1, notes=notes)
        )
    logger.info(f"Seeded {len(created)} demo blocks for {day.isoformat()}")
    return list(reversed(created))
