"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from shiftboard.api.v1 import blocks, bookings, views

api_router = APIRouter()

# Blocks
api_router.include_router(blocks.router, prefix="/blocks", tags=["Blocks"])

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

# Panel snapshots
api_router.include_router(views.router, prefix="/views", tags=["Views"])
