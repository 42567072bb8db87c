"""FastAPI application entry point."""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shiftboard.api.v1.router import api_router
from shiftboard.config import Settings, get_settings
from shiftboard.core.exceptions import AppException
from shiftboard.core.logging import configure_logging
from shiftboard.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from shiftboard.services.scheduling_service import SchedulingService
from shiftboard.services.seed import seed_demo_blocks

logger = logging.getLogger(__name__)


def create_application(
    settings: Settings | None = None,
    service: SchedulingService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to run with, defaults to the environment
        service: Pre-built scheduling state, a fresh one is created from
            ``settings`` if omitted. An injected service keeps its own
            location, capacity enforcement and display timezone; the
            matching settings fields are not applied to it.

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Shift blocks and staff bookings with admin approval",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # State lives on the app instance, one per process
    if service is None:
        service = SchedulingService.from_settings(settings)
        if settings.seed_demo_blocks:
            seed_demo_blocks(service)
    app.state.settings = settings
    app.state.scheduling_service = service

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )

    # Middleware (order matters - first added = last executed)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "location": service.location,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    logger.info(
        f"{settings.app_name} ready (location={service.location}, "
        f"enforce_capacity={service.enforce_capacity})"
    )
    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    # Single worker: scheduling state is held in process memory
    uvicorn.run(
        "shiftboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1,
    )
