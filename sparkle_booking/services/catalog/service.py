"""
Catalog service for the read-only service listing.
"""

from typing import List, Optional

from ...core.exceptions import CatalogUnavailableError
from ...core.models import Service
from ...utils.logging import get_logger
from ..storage import BookingRepository
from .data import DEFAULT_SERVICES

logger = get_logger("sparkle.catalog")


class CatalogService:
    """Read access to the service catalog."""

    def __init__(self, repository: BookingRepository):
        self.repository = repository

    async def list_services(self) -> List[Service]:
        """
        List all services, cheapest first.

        Raises:
            CatalogUnavailableError: when the catalog cannot be read; no
                partial list is returned.
        """
        try:
            services = await self.repository.list_services()
        except Exception as e:
            logger.error("Error fetching services: %s", e, exc_info=True)
            raise CatalogUnavailableError() from e
        return sorted(services, key=lambda s: s.price)

    async def get_service(self, service_id: str) -> Optional[Service]:
        """Look up a single service; None when the id is unknown."""
        return await self.repository.get_service(service_id)

    async def get_price(self, service_id: str) -> Optional[int]:
        service = await self.get_service(service_id)
        return service.price if service else None

    async def seed_defaults(self) -> int:
        inserted = await self.repository.seed_services(DEFAULT_SERVICES)
        if inserted:
            logger.info("Seeded %d catalog services", inserted)
        return inserted
