"""
Booking-related enums.
"""

from enum import Enum


class BookingStep(str, Enum):
    """Enumeration of the booking form steps, in order, plus the terminal state."""

    DATE_TIME = "date_time"
    LOCATION = "location"
    CONTACT = "contact"
    REVIEW = "review"
    SUCCESS = "success"

    @property
    def number(self) -> int:
        """1-based position of the step; SUCCESS sits after REVIEW."""
        return list(BookingStep).index(self) + 1

    @property
    def label(self) -> str:
        return _STEP_LABELS[self]


_STEP_LABELS = {
    BookingStep.DATE_TIME: "Date & Time",
    BookingStep.LOCATION: "Location",
    BookingStep.CONTACT: "Contact Info",
    BookingStep.REVIEW: "Review",
    BookingStep.SUCCESS: "Booked",
}


class BookingStatus(str, Enum):
    """Booking status enumeration."""

    CONFIRMED = "confirmed"


class SubmissionStatus(str, Enum):
    """User-visible state of a booking submission."""

    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


class NotificationStatus(str, Enum):
    """Observed outcome of a single confirmation send."""

    SENT = "sent"
    FAILED = "failed"
    UNKNOWN = "unknown"
