"""
Core data models for the SparkleGo booking system.
"""

from .service import Service
from .customer import Customer, CustomerUpsert
from ..constants import TIME_SLOTS
from .booking import (
    Booking,
    BookingDetails,
    BookingDraft,
    BookingOutcome,
    BookingPayload,
)
from .submission import SubmissionResult

__all__ = [
    "Service",
    "Customer",
    "CustomerUpsert",
    "TIME_SLOTS",
    "Booking",
    "BookingDetails",
    "BookingDraft",
    "BookingOutcome",
    "BookingPayload",
    "SubmissionResult",
]
