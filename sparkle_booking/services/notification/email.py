"""
Confirmation emails sent through the Resend HTTP API.
"""

from typing import Any, Dict, Optional
import httpx

from ...config import NotificationConfig
from ...core.exceptions import NotificationError
from ...utils.logging import get_logger
from ...utils.phone import PhoneNumberParser
from ..storage import BookingRepository
from .dispatcher import NotificationDispatcher
from .templates import render_confirmation

logger = get_logger("sparkle.notification.email")


class EmailNotificationDispatcher(NotificationDispatcher):
    """Dispatcher that renders the booking and posts it to Resend."""

    def __init__(
        self,
        repository: BookingRepository,
        config: NotificationConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.repository = repository
        self.config = config
        self._transport = transport

    async def _make_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST to the emails endpoint with error handling."""
        headers = {"Authorization": f"Bearer {self.config.resend_api_key}"}
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as client:
                response = await client.post(self.config.get_emails_url(), json=payload, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise NotificationError("Email request timed out") from e
        except httpx.HTTPStatusError as e:
            raise NotificationError(f"Email API HTTP error {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NotificationError(f"Email request failed: {e}") from e

    async def send(self, booking_id: str, recipient_email: str, recipient_name: str) -> bool:
        if not self.config.is_configured():
            logger.warning("Skipping confirmation email: RESEND_API_KEY not configured")
            return False
        if not recipient_email or PhoneNumberParser.is_placeholder_email(recipient_email):
            logger.warning("Skipping confirmation email for booking %s: no deliverable address", booking_id)
            return False

        details = await self.repository.get_booking_details(booking_id)
        if details is None:
            raise NotificationError(f"Booking not found: {booking_id}")

        subject, html = render_confirmation(
            details,
            recipient_name,
            currency=self.config.currency,
            support_email=self.config.support_email,
        )
        result = await self._make_request(
            {
                "from": self.config.sender,
                "to": [recipient_email],
                "subject": subject,
                "html": html,
            }
        )
        logger.info("Confirmation email sent for booking %s (id=%s)", booking_id, result.get("id"))
        return True
