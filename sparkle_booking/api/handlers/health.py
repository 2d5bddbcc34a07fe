"""
Health check handler.
"""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...config import Settings
from ...services.storage import BookingRepository
from ...utils.logging import get_logger

logger = get_logger("sparkle.api.health")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float


class ReadinessResponse(BaseModel):
    """Readiness of the booking database and catalog."""
    status: str
    services: int = 0
    error: Optional[str] = None


class HealthHandler:
    """Liveness and readiness endpoints; readiness queries the booking database."""

    def __init__(self, settings: Settings, repository: BookingRepository):
        self.settings = settings
        self.repository = repository
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    async def check_ready(self) -> ReadinessResponse:
        """Ready once the database answers and the catalog holds at least one service."""
        try:
            services = await self.repository.list_services()
        except Exception as e:
            logger.error("Readiness check failed: %s", e)
            return ReadinessResponse(status="unavailable", error=str(e))
        if not services:
            return ReadinessResponse(status="unavailable", error="Service catalog is empty")
        return ReadinessResponse(status="ready", services=len(services))

    def _setup_routes(self):

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime,
            )

        @self.router.get("/ready", response_model=ReadinessResponse)
        async def readiness_check():
            readiness = await self.check_ready()
            if readiness.status != "ready":
                return JSONResponse(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    content=readiness.model_dump(),
                )
            return readiness

        @self.router.get("/live")
        async def liveness_check():
            return {"status": "alive"}
