"""
FastAPI application factory and configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..core.exceptions import BookingTransactionError, CatalogUnavailableError
from ..services.notification import NotificationDispatcher
from ..services.storage import BookingRepository
from ..utils.logging import configure_logging
from .dependencies import build_container
from .handlers import BookingsHandler, HealthHandler, ServicesHandler
from .middleware import LoggingMiddleware, SecurityHeaders


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[BookingRepository] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    container = build_container(settings, repository=repository, dispatcher=dispatcher)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.startup()
        yield
        await container.shutdown()

    app = FastAPI(
        title=settings.app_name,
        description="Booking submission API for SparkleGo mobile car wash",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(BookingTransactionError)
    async def booking_transaction_error(request: Request, exc: BookingTransactionError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": exc.code, "message": exc.reason}},
        )

    @app.exception_handler(CatalogUnavailableError)
    async def catalog_unavailable(request: Request, exc: CatalogUnavailableError):
        return JSONResponse(
            status_code=503,
            content={"error": {"code": "catalog_unavailable", "message": str(exc)}},
        )

    # Initialize handlers
    health_handler = HealthHandler(settings, container.repository)
    services_handler = ServicesHandler(container.catalog)
    bookings_handler = BookingsHandler(container.transaction, container.repository)

    # Register routes
    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(services_handler.router, prefix="/services", tags=["catalog"])
    app.include_router(bookings_handler.router, prefix="/bookings", tags=["bookings"])

    return app
