"""
Booking service module.
"""

from .gateway import BookingGateway, HttpBookingGateway
from .step_controller import StepController
from .summary import BookingSummary, build_summary
from .submission import BookingSubmissionOrchestrator
from .transaction import NOTIFICATION_WARNING, BookingTransaction
from .flow import BookingFlow

__all__ = [
    "BookingGateway",
    "HttpBookingGateway",
    "StepController",
    "BookingSummary",
    "build_summary",
    "BookingSubmissionOrchestrator",
    "BookingTransaction",
    "NOTIFICATION_WARNING",
    "BookingFlow",
]
