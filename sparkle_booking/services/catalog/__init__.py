"""
Service catalog module.
"""

from .service import CatalogService
from .data import DEFAULT_SERVICES

__all__ = [
    "CatalogService",
    "DEFAULT_SERVICES",
]
