"""
API route handlers.
"""

from .health import HealthHandler
from .services import ServicesHandler
from .bookings import BookingsHandler

__all__ = [
    "HealthHandler",
    "ServicesHandler",
    "BookingsHandler",
]
