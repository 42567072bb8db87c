"""In-memory block store."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any

from shiftboard.core.exceptions import NotFoundError, ValidationError
from shiftboard.domain.block_state import assert_block_transition
from shiftboard.models.block import Block, BlockStatus
from shiftboard.utils.identifiers import BLOCK_PREFIX, generate_id
from shiftboard.utils.time_format import DEFAULT_TIMEZONE, parse_local_datetime

logger = logging.getLogger(__name__)

MIN_CAPACITY = 1


def normalize_capacity(capacity: Any) -> int:
    """Coerce a form capacity to an int of at least 1.

    Empty values fall back to 1, numbers below 1 are clamped up.

    Raises:
        ValidationError: If capacity is not a whole number
    """
    if capacity is None or capacity == "":
        return MIN_CAPACITY
    if isinstance(capacity, bool):
        raise ValidationError("capacity must be a whole number")
    if isinstance(capacity, float):
        if not capacity.is_integer():
            raise ValidationError("capacity must be a whole number")
        capacity = int(capacity)
    try:
        value = int(capacity)
    except (TypeError, ValueError):
        raise ValidationError(f"capacity must be a whole number, got '{capacity}'")
    return max(MIN_CAPACITY, value)


class BlockStore:
    """Blocks kept newest first. Blocks are never deleted.

    Blocks are immutable; a status change swaps in an updated copy, so
    anything handed out earlier keeps showing the state it was read in.
    """

    def __init__(self, location: str, id_length: int = 6, timezone: str = DEFAULT_TIMEZONE) -> None:
        self.location = location
        self.id_length = id_length
        self.timezone = timezone
        self._blocks: list[Block] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def exists(self, block_id: str) -> bool:
        return any(b.id == block_id for b in self._blocks)

    def find(self, block_id: str) -> Block | None:
        for block in self._blocks:
            if block.id == block_id:
                return block
        return None

    def get(self, block_id: str) -> Block:
        block = self.find(block_id)
        if block is None:
            raise NotFoundError("Block", block_id)
        return block

    def list(self, status: str | None = None) -> list[Block]:
        if status is None:
            return list(self._blocks)
        return [b for b in self._blocks if b.status == status]

    def create(
        self,
        title: str | None,
        starts_at: datetime | str | None,
        ends_at: datetime | str | None,
        capacity: Any = 1,
        notes: str | None = None,
    ) -> Block:
        """Create an open block and put it first.

        Args:
            title: Display label, required
            starts_at: Window start (local wall-clock)
            ends_at: Window end, must be after start
            capacity: Max approved bookings, clamped to at least 1
            notes: Optional free text

        Returns:
            Block: The new block

        Raises:
            ValidationError: On a missing field, bad capacity or empty window.
                Nothing is stored in that case.
        """
        title = (title or "").strip()
        if not title:
            raise ValidationError("title is required")

        start = parse_local_datetime(starts_at, "starts_at", self.timezone)
        end = parse_local_datetime(ends_at, "ends_at", self.timezone)
        if end <= start:
            raise ValidationError("ends_at must be after starts_at")

        block = Block(
            id=generate_id(BLOCK_PREFIX, self.id_length, exists=self.exists),
            title=title,
            location=self.location,
            starts_at=start,
            ends_at=end,
            capacity=normalize_capacity(capacity),
            status=BlockStatus.OPEN,
            notes=(notes or "").strip() or None,
        )
        self._blocks.insert(0, block)
        logger.info(f"Block created: {block.id} '{block.title}' capacity={block.capacity}")
        return block

    def close(self, block_id: str) -> Block:
        return self._set_status(block_id, BlockStatus.CLOSED)

    def reopen(self, block_id: str) -> Block:
        return self._set_status(block_id, BlockStatus.OPEN)

    def cancel(self, block_id: str) -> Block:
        return self._set_status(block_id, BlockStatus.CANCELLED)

    def _set_status(self, block_id: str, target: BlockStatus) -> Block:
        block = self.get(block_id)
        if block.status == target:
            logger.debug(f"Block {block_id} already {target.value}")
            return block

        assert_block_transition(block.status, target)
        updated = replace(block, status=target)
        self._blocks[self._blocks.index(block)] = updated
        logger.info(f"Block {block_id}: {block.status.value} → {target.value}")
        return updated
