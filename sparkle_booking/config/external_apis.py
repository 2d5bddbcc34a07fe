"""
External API configuration.
"""

from typing import Optional
from pydantic import BaseModel

from .settings import Settings


class NotificationConfig(BaseModel):
    """Confirmation email (Resend) configuration settings."""

    resend_api_key: Optional[str] = None
    resend_api_base: str = "https://api.resend.com"
    sender: str = "SparkleGo <booking@resend.dev>"
    support_email: str = "support@sparklego.com"
    currency: str = "EGP"
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "NotificationConfig":
        return cls(
            resend_api_key=settings.resend_api_key,
            resend_api_base=settings.resend_api_base,
            sender=settings.notification_from,
            support_email=settings.support_email,
            currency=settings.currency,
            timeout=settings.http_timeout,
        )

    def get_emails_url(self) -> str:
        """Get the Resend send-email endpoint."""
        return f"{self.resend_api_base.rstrip('/')}/emails"

    def is_configured(self) -> bool:
        """Check if the email API is properly configured."""
        return bool(self.resend_api_key)
