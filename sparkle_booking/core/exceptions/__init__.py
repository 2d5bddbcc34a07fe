"""
Custom exceptions for the SparkleGo booking system.
"""

from .booking import BookingFlowError, BookingValidationError, NoServiceSelectedError
from .transaction import (
    TRANSACTION_ERRORS,
    BookingInsertError,
    BookingTransactionError,
    CustomerUpsertError,
    ServiceLookupError,
)
from .external import CatalogUnavailableError, ExternalAPIError, NotificationError

__all__ = [
    "BookingFlowError",
    "BookingValidationError",
    "NoServiceSelectedError",
    "BookingTransactionError",
    "CustomerUpsertError",
    "ServiceLookupError",
    "BookingInsertError",
    "TRANSACTION_ERRORS",
    "ExternalAPIError",
    "NotificationError",
    "CatalogUnavailableError",
]
