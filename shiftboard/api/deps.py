"""API dependencies."""

from fastapi import Request

from shiftboard.services.scheduling_service import SchedulingService


def get_scheduling_service(request: Request) -> SchedulingService:
    """Scheduling state owned by the running application."""
    return request.app.state.scheduling_service
