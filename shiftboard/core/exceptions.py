"""Custom application exceptions."""

from typing import Any

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class ValidationError(AppException):
    """Validation error exception."""

    def __init__(self, detail: str = "Validation failed", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateBooking(AppException):
    """Employee already holds a pending or approved booking on the block."""

    def __init__(self, detail: str = "Du hast für diesen Block bereits eine Buchung.") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BlockNotOpen(AppException):
    """Block is closed or cancelled and does not take requests."""

    def __init__(self, detail: str = "This block is not open for booking") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class CapacityExceeded(AppException):
    """Block has no approved capacity left."""

    def __init__(self, detail: str = "This block is fully booked") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InvalidTransition(AppException):
    """Status change not allowed from the current status."""

    def __init__(self, detail: str = "This operation is not allowed for the current status") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
