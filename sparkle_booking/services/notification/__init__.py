"""
Notification module.
"""

from .dispatcher import NotificationDispatcher, LoggingNotificationDispatcher
from .email import EmailNotificationDispatcher
from .templates import render_confirmation

__all__ = [
    "NotificationDispatcher",
    "LoggingNotificationDispatcher",
    "EmailNotificationDispatcher",
    "render_confirmation",
]
