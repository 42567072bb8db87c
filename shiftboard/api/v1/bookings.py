"""Booking endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from shiftboard.api.deps import get_scheduling_service
from shiftboard.models.booking import Booking, BookingStatus
from shiftboard.schemas.booking import BookingCreate, BookingResponse
from shiftboard.services.scheduling_service import SchedulingService

router = APIRouter()


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def request_booking(
    booking_data: BookingCreate,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Booking:
    """Request a booking on an open block (staff). Starts as pending."""
    return service.request_booking(
        block_id=booking_data.block_id,
        employee_name=booking_data.employee_name,
        employee_email=booking_data.employee_email,
    )


@router.get("/", response_model=list[BookingResponse])
async def list_bookings(
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
    status_filter: BookingStatus | None = Query(default=None, alias="status"),
    block_id: str | None = None,
) -> list[Booking]:
    """List bookings, newest first."""
    return service.list_bookings(
        status=status_filter.value if status_filter else None,
        block_id=block_id,
    )


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Booking:
    """Get a booking by ID."""
    return service.get_booking(booking_id)


@router.post("/{booking_id}/approve", response_model=BookingResponse)
async def approve_booking(
    booking_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Booking:
    """Approve a pending booking (admin). No-op for other statuses."""
    return service.approve_booking(booking_id)


@router.post("/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking(
    booking_id: str,
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> Booking:
    """Reject a pending booking or revoke an approved one (admin)."""
    return service.cancel_booking(booking_id)
