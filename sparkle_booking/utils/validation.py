"""
Validation utilities for booking input.
"""

import re
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from ..core.constants import TIME_SLOTS
from .phone import PhoneNumberParser


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ValidationUtils:
    """Validation utilities for various data types."""

    @staticmethod
    def is_blank(value: Any) -> bool:
        return value is None or not str(value).strip()

    @staticmethod
    def blank_fields(obj: Any, names: Iterable[str]) -> List[str]:
        """Return the attributes of ``obj`` among ``names`` that are blank."""
        return [name for name in names if ValidationUtils.is_blank(getattr(obj, name, None))]

    @staticmethod
    def validate_date(value: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a calendar date in YYYY-MM-DD format.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not value:
            return False, "Date is required"
        try:
            date.fromisoformat(value)
        except ValueError:
            return False, "Invalid date. Please use YYYY-MM-DD"
        return True, None

    @staticmethod
    def validate_time_slot(value: str) -> Tuple[bool, Optional[str]]:
        if not value:
            return False, "Time is required"
        if value not in TIME_SLOTS:
            return False, f"Please choose one of the available time slots: {', '.join(TIME_SLOTS)}"
        return True, None

    @staticmethod
    def validate_name(name: str) -> Tuple[bool, Optional[str]]:
        if not name or not isinstance(name, str) or not name.strip():
            return False, "Name is required"
        if len(name.strip()) > 100:
            return False, "Name is too long"
        return True, None

    @staticmethod
    def validate_phone(phone: str) -> Tuple[bool, Optional[str]]:
        if not phone:
            return False, "Phone number is required"
        if not PhoneNumberParser.is_valid(phone):
            return False, "Invalid phone number. Please use 01X XXXX XXXX"
        return True, None

    @staticmethod
    def validate_email(email: Optional[str]) -> Tuple[bool, Optional[str]]:
        """Optional field: blank is valid."""
        if not email:
            return True, None
        if not _EMAIL_RE.match(email.strip()):
            return False, "Invalid email address"
        return True, None

    @staticmethod
    def sanitize_text(text: str) -> str:
        """Remove control characters and collapse whitespace."""
        if not text:
            return ""
        text = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", text)
        text = re.sub(r"\s+", " ", text)
        return text.strip()
