"""
Booking creation transaction exceptions.

Each stage that must succeed has its own error class. The class carries the
user-facing message and the HTTP status used by the API layer, so the same
classification survives a round trip through ``HttpBookingGateway``.
"""

from typing import Dict, Optional, Type


class BookingTransactionError(Exception):
    """Base exception for an aborted booking transaction."""

    code = "booking_transaction_failed"
    user_message = "Failed to create booking. Please try again."
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)

    @property
    def reason(self) -> str:
        return str(self)


class CustomerUpsertError(BookingTransactionError):
    """Exception raised when the customer profile cannot be created or updated."""

    code = "customer_upsert_failed"
    user_message = "Failed to create customer profile"


class ServiceLookupError(BookingTransactionError):
    """Exception raised when the service price cannot be resolved."""

    code = "service_lookup_failed"
    user_message = "Failed to fetch service details"
    status_code = 404


class BookingInsertError(BookingTransactionError):
    """Exception raised when the booking row cannot be written."""

    code = "booking_insert_failed"
    user_message = "Failed to create booking"


TRANSACTION_ERRORS: Dict[str, Type[BookingTransactionError]] = {
    cls.code: cls
    for cls in (BookingTransactionError, CustomerUpsertError, ServiceLookupError, BookingInsertError)
}
