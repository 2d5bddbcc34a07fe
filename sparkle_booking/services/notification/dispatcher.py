"""
Notification dispatcher contract.
"""

from abc import ABC, abstractmethod

from ...utils.logging import get_logger


class NotificationDispatcher(ABC):
    """Sends a booking confirmation to a recipient.

    The result is only used for logging and user messaging; it never decides
    whether the booking exists.
    """

    @abstractmethod
    async def send(self, booking_id: str, recipient_email: str, recipient_name: str) -> bool:
        """Send the confirmation. Returns True when the message was accepted."""
        raise NotImplementedError


class LoggingNotificationDispatcher(NotificationDispatcher):
    """Development dispatcher that only records the send."""

    def __init__(self) -> None:
        self._logger = get_logger("sparkle.notification")
        self.sent: list[tuple[str, str, str]] = []

    async def send(self, booking_id: str, recipient_email: str, recipient_name: str) -> bool:
        self.sent.append((booking_id, recipient_email, recipient_name))
        self._logger.info(
            "Confirmation for booking %s to %s <%s> (logged only)",
            booking_id,
            recipient_name,
            recipient_email,
        )
        return True
