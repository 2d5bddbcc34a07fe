"""
Persistence layer.
"""

from .repository import BookingRepository

__all__ = [
    "BookingRepository",
]
