"""
Catalog listing handler.
"""

from typing import List
from fastapi import APIRouter

from ...core.models import Service
from ...services.catalog import CatalogService


class ServicesHandler:
    """Handler for the read-only service catalog."""

    def __init__(self, catalog: CatalogService):
        self.catalog = catalog
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        @self.router.get("", response_model=List[Service])
        async def list_services():
            """List bookable services, cheapest first."""
            return await self.catalog.list_services()
