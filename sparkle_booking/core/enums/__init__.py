"""
Enums for the SparkleGo booking system.
"""

from .booking import BookingStep, BookingStatus, SubmissionStatus, NotificationStatus

__all__ = [
    "BookingStep",
    "BookingStatus",
    "SubmissionStatus",
    "NotificationStatus",
]
