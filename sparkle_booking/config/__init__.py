"""
Configuration management for the SparkleGo booking system.
"""

from .settings import Settings, get_settings
from .database import DatabaseConfig
from .external_apis import NotificationConfig

__all__ = [
    "Settings",
    "get_settings",
    "DatabaseConfig",
    "NotificationConfig",
]
