"""
Utility modules for the SparkleGo booking system.
"""

from .phone import PhoneNumberParser
from .validation import ValidationUtils
from .logging import configure_logging, get_logger

__all__ = [
    "PhoneNumberParser",
    "ValidationUtils",
    "configure_logging",
    "get_logger",
]
