"""Block-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shiftboard.models.block import BlockStatus


class BlockCreate(BaseModel):
    """Schema for creating a block.

    Required fields are checked by the block store so that a missing title
    or window is reported the same way from every entry point.
    """

    title: str = Field(default="", max_length=200)
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    capacity: int = 1
    notes: str | None = Field(None, max_length=1000)


class BlockResponse(BaseModel):
    """Schema for block response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    location: str
    starts_at: datetime
    ends_at: datetime
    capacity: int
    status: BlockStatus
    notes: str | None
    created_at: datetime
