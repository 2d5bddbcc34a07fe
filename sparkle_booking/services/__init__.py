"""
Service layer for the SparkleGo booking system.
"""

from .storage import BookingRepository
from .catalog import CatalogService
from .notification import NotificationDispatcher, EmailNotificationDispatcher, LoggingNotificationDispatcher
from .booking import BookingFlow, BookingSubmissionOrchestrator, BookingTransaction, StepController

__all__ = [
    "BookingRepository",
    "CatalogService",
    "NotificationDispatcher",
    "EmailNotificationDispatcher",
    "LoggingNotificationDispatcher",
    "BookingFlow",
    "BookingSubmissionOrchestrator",
    "BookingTransaction",
    "StepController",
]
