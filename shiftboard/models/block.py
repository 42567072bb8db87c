"""Block entity: a bookable capacity window."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class BlockStatus(str, Enum):
    """Block lifecycle states."""

    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Block:
    """Admin-defined time window with a capacity, open for staff booking."""

    id: str
    title: str
    location: str
    starts_at: datetime  # local wall-clock, minute precision
    ends_at: datetime
    capacity: int = 1
    status: BlockStatus = BlockStatus.OPEN
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_open(self) -> bool:
        return self.status == BlockStatus.OPEN
