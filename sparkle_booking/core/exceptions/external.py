"""
External collaborator exceptions.
"""


class ExternalAPIError(Exception):
    """Base exception for external API errors."""
    pass


class NotificationError(ExternalAPIError):
    """Exception raised when a confirmation message cannot be sent."""
    pass


class CatalogUnavailableError(Exception):
    """Exception raised when the service catalog cannot be loaded."""

    def __init__(self, message: str = "Failed to load services. Please try again."):
        super().__init__(message)
