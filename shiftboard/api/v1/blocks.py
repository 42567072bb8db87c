"""Block endpoints (admin panel)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from shiftboard.api.deps import get_scheduling_service
from shiftboard.models.block import Block, BlockStatus
from shiftboard.models.booking import Booking
from shiftboard.schemas.block import BlockCreate, BlockResponse
from shiftboard.schemas.booking import BookingResponse
from shiftboard.services.scheduling_service import SchedulingService

router = APIRouter()


@router.post("/", response_model=BlockResponse, status_code=status.HTTP_201_CREATED)
async def create_block(
    block_data: BlockCreate,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Block:
    """Create an open block."""
    return service.create_block(
        title=block_data.title,
        starts_at=block_data.starts_at,
        ends_at=block_data.ends_at,
        capacity=block_data.capacity,
        notes=block_data.notes,
    )


@router.get("/", response_model=list[BlockResponse])
async def list_blocks(
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
    status_filter: BlockStatus | None = Query(default=None, alias="status"),
) -> list[Block]:
    """List blocks, newest first."""
    return service.list_blocks(status=status_filter.value if status_filter else None)


@router.get("/{block_id}", response_model=BlockResponse)
async def get_block(
    block_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Block:
    """Get a block by ID."""
    return service.get_block(block_id)


@router.get("/{block_id}/bookings", response_model=list[BookingResponse])
async def get_block_bookings(
    block_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> list[Booking]:
    """Bookings filed against one block, newest first."""
    service.get_block(block_id)
    return service.bookings_by_block().get(block_id, [])


@router.post("/{block_id}/close", response_model=BlockResponse)
async def close_block(
    block_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Block:
    """Stop taking requests on a block."""
    return service.close_block(block_id)


@router.post("/{block_id}/reopen", response_model=BlockResponse)
async def reopen_block(
    block_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Block:
    """Open a closed block again."""
    return service.reopen_block(block_id)


@router.post("/{block_id}/cancel", response_model=BlockResponse)
async def cancel_block(
    block_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Block:
    """Cancel a block permanently."""
    return service.cancel_block(block_id)
