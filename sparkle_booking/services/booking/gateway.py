"""
Gateways the submission orchestrator uses to reach the booking transaction.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import httpx

from ...core.exceptions import TRANSACTION_ERRORS, BookingTransactionError, BookingValidationError
from ...core.models import BookingOutcome, BookingPayload
from ...config import get_settings
from ...utils.logging import get_logger

logger = get_logger("sparkle.booking.gateway")


class BookingGateway(ABC):
    """Anything that can run the booking creation transaction for a payload."""

    @abstractmethod
    async def create_booking(self, payload: BookingPayload) -> BookingOutcome:
        """Create the booking or raise a ``BookingTransactionError`` subclass.

        Payloads the server rejects as malformed raise ``BookingValidationError``.
        """
        raise NotImplementedError


class HttpBookingGateway(BookingGateway):
    """Runs the transaction through the HTTP API (``POST /bookings``)."""

    UNREACHABLE = "Could not reach the booking service. Please try again."

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    async def create_booking(self, payload: BookingPayload) -> BookingOutcome:
        url = f"{self.base_url}/bookings"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload.model_dump(mode="json"))
        except httpx.HTTPError as e:
            logger.error("Booking request failed: %s", e)
            raise BookingTransactionError(self.UNREACHABLE) from e

        if response.status_code >= 400:
            raise self._error_from_response(response)
        return BookingOutcome.model_validate(response.json())

    @staticmethod
    def _error_from_response(response: httpx.Response) -> Exception:
        """Rebuild the classified error from an ``{"error": {"code", "message"}}`` body.

        A 422 ``{"detail": [...]}`` body becomes a ``BookingValidationError``
        naming the rejected fields.
        """
        try:
            body: Dict[str, Any] = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        detail = body.get("detail")
        if response.status_code == 422 and isinstance(detail, list):
            return BookingValidationError.from_errors(err for err in detail if isinstance(err, dict))

        error = body.get("error")
        if not isinstance(error, dict):
            logger.error("Booking API returned HTTP %s without an error body", response.status_code)
            return BookingTransactionError()
        cls = TRANSACTION_ERRORS.get(error.get("code"), BookingTransactionError)
        return cls(error.get("message"))
