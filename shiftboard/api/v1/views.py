"""Panel snapshot endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from shiftboard.api.deps import get_scheduling_service
from shiftboard.schemas.views import AdminViewResponse, StaffViewResponse
from shiftboard.services.scheduling_service import SchedulingService
from shiftboard.services.snapshot_service import build_admin_view, build_staff_view

router = APIRouter()


@router.get("/admin", response_model=AdminViewResponse)
async def admin_view(
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> AdminViewResponse:
    """Blocks and bookings for the admin panel, in the service's display timezone."""
    return build_admin_view(service)


@router.get("/staff", response_model=StaffViewResponse)
async def staff_view(
    service: Annotated[SchedulingService, Depends(get_scheduling_service)],
) -> StaffViewResponse:
    """Open blocks for the staff panel."""
    return build_staff_view(service)
