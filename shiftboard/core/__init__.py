"""Core utilities: errors, logging and middleware."""

from shiftboard.core.exceptions import (
    AppException,
    BlockNotOpen,
    CapacityExceeded,
    DuplicateBooking,
    InvalidTransition,
    NotFoundError,
    ValidationError,
)
from shiftboard.core.logging import configure_logging

__all__ = [
    "AppException",
    "BlockNotOpen",
    "CapacityExceeded",
    "DuplicateBooking",
    "InvalidTransition",
    "NotFoundError",
    "ValidationError",
    "configure_logging",
]
